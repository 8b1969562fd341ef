"""Quiz Prompts - Templates de prompts."""

from .templates import DEFAULT_QUESTION_COUNT, QUIZ_GENERATION_PROMPT, PromptBuilder

__all__ = ["DEFAULT_QUESTION_COUNT", "QUIZ_GENERATION_PROMPT", "PromptBuilder"]
