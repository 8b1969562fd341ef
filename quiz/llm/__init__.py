"""Quiz LLM - Cliente do serviço de completion."""

from .client import CompletionClient
from .factory import LLMClientFactory

__all__ = ["CompletionClient", "LLMClientFactory"]
