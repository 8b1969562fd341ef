"""Quiz Storage - Repositórios sobre AgentFS."""

from .quiz_store import QuizStore
from .submission_store import SubmissionStore

__all__ = ["QuizStore", "SubmissionStore"]
