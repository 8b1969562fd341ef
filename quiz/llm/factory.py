"""LLM Client Factory - Criação do CompletionClient a partir da configuração."""

import httpx

from ..config import QuizConfig
from .client import CompletionClient


class LLMClientFactory:
    """Factory para criar CompletionClient com configuração consistente.

    Centraliza credenciais, modelo, timeout, prazo total e política de retry,
    que vêm sempre de um QuizConfig explícito (nunca de estado global).

    Example:
        >>> factory = LLMClientFactory(QuizConfig.from_env())
        >>> client = factory.create_client()
        >>> text = await client.complete(prompt)
    """

    def __init__(self, config: QuizConfig):
        self.config = config

    def create_client(self, http_client: httpx.AsyncClient | None = None) -> CompletionClient:
        """Cria um CompletionClient.

        Args:
            http_client: Cliente httpx opcional (testes, pool compartilhado)

        Returns:
            CompletionClient configurado
        """
        return CompletionClient(
            url=self.config.completion_url,
            api_key=self.config.completion_api_key,
            model=self.config.completion_model,
            timeout=self.config.completion_timeout,
            max_attempts=self.config.completion_max_attempts,
            backoff=self.config.completion_backoff,
            deadline=self.config.completion_deadline,
            http_client=http_client,
        )

    @classmethod
    def from_env(cls) -> "LLMClientFactory":
        return cls(QuizConfig.from_env())
