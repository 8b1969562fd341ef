"""Quiz Models - Enums e Schemas."""

from .enums import CompletionFailureKind
from .schemas import (
    OPTIONS_PER_QUESTION,
    AnswerRecord,
    GenerateQuizRequest,
    GenerateQuizResponse,
    PreviousQuizRequest,
    PreviousQuizResponse,
    Quiz,
    QuizQuestion,
    Submission,
    SubmitQuizRequest,
    SubmitQuizResponse,
    SubmittedAnswer,
)

__all__ = [
    # Enums
    "CompletionFailureKind",
    # Domínio
    "OPTIONS_PER_QUESTION",
    "QuizQuestion",
    "Quiz",
    "AnswerRecord",
    "Submission",
    # Request/Response
    "GenerateQuizRequest",
    "GenerateQuizResponse",
    "SubmittedAnswer",
    "SubmitQuizRequest",
    "SubmitQuizResponse",
    "PreviousQuizRequest",
    "PreviousQuizResponse",
]
