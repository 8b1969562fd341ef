"""Quiz Module - Geração, validação e correção de quizzes.

Arquitetura:
- models/: Enums e Schemas Pydantic (Quiz, QuizQuestion, Submission)
- prompts/: PromptBuilder e template de geração
- llm/: CompletionClient e LLMClientFactory
- engine/: QuizValidator, SubmissionGrader, QuizEngine
- storage/: QuizStore e SubmissionStore (AgentFS)
- config.py: QuizConfig
- errors.py: Taxonomia de erros
- router.py: FastAPI endpoints
"""

from .config import QuizConfig
from .engine import QuizEngine, QuizValidator, SubmissionGrader, answers_match
from .errors import (
    CompletionFailure,
    EmptyContent,
    InvalidQuizFormat,
    PersistenceFailure,
    QuizError,
    QuizNotFound,
    SubmissionNotFound,
)
from .llm import CompletionClient, LLMClientFactory
from .models import AnswerRecord, Quiz, QuizQuestion, Submission
from .prompts import PromptBuilder
from .storage import QuizStore, SubmissionStore

__all__ = [
    # Config
    "QuizConfig",
    # Models
    "QuizQuestion",
    "Quiz",
    "AnswerRecord",
    "Submission",
    # Engines
    "PromptBuilder",
    "QuizValidator",
    "SubmissionGrader",
    "answers_match",
    "QuizEngine",
    # LLM
    "CompletionClient",
    "LLMClientFactory",
    # Storage
    "QuizStore",
    "SubmissionStore",
    # Errors
    "QuizError",
    "EmptyContent",
    "CompletionFailure",
    "InvalidQuizFormat",
    "QuizNotFound",
    "SubmissionNotFound",
    "PersistenceFailure",
]
