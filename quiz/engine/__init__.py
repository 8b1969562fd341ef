"""Quiz Engines - Lógica de negócios."""

from .quiz_engine import QuizEngine, make_title
from .scoring_engine import SubmissionGrader, answers_match
from .validator import QuizValidator, ValidationResult

__all__ = [
    "QuizEngine",
    "make_title",
    "QuizValidator",
    "ValidationResult",
    "SubmissionGrader",
    "answers_match",
]
