"""Completion Client - Chamada ao serviço externo de chat completions."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import httpx
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception,
    stop_after_attempt,
    stop_after_delay,
    wait_exponential,
)

from ..errors import CompletionFailure
from ..models.enums import CompletionFailureKind

logger = logging.getLogger(__name__)


def _is_retryable(exc: BaseException) -> bool:
    return isinstance(exc, CompletionFailure) and exc.retryable


def _log_retry(retry_state: RetryCallState) -> None:
    exc = retry_state.outcome.exception() if retry_state.outcome else None
    logger.warning(
        f"Completion falhou (tentativa {retry_state.attempt_number}): {exc}. "
        f"Nova tentativa em {retry_state.next_action.sleep if retry_state.next_action else 0:.1f}s"
    )


class CompletionClient:
    """Cliente HTTP para endpoints de chat completion (formato OpenAI/Mistral).

    Envia uma única mensagem de usuário com o prompt e devolve o texto de
    ``choices[0].message.content``. Não contém regra de negócio.

    Cada tentativa tem um teto de latência (timeout) e a chamada inteira,
    com retries e esperas, tem um prazo total (deadline). Falhas de rede,
    timeouts, 429 e 5xx são repetidas com backoff exponencial. Envelope
    malformado e 4xx falham imediatamente.

    Example:
        >>> client = CompletionClient(url, api_key="sk-...", model="mistral-tiny")
        >>> text = await client.complete("Generate a quiz ...")
    """

    def __init__(
        self,
        url: str,
        api_key: str,
        model: str,
        timeout: float = 60.0,
        max_attempts: int = 3,
        backoff: float = 1.0,
        deadline: float | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        self.url = url
        self.api_key = api_key
        self.model = model
        self.timeout = timeout
        self.max_attempts = max_attempts
        self.backoff = backoff
        # Sem deadline explícito: uma janela de timeout por tentativa
        self.deadline = deadline if deadline is not None else timeout * max_attempts
        self._http = http_client
        self._owns_http = http_client is None

    def _get_http(self) -> httpx.AsyncClient:
        if self._http is None:
            self._http = httpx.AsyncClient(timeout=httpx.Timeout(self.timeout))
        return self._http

    async def aclose(self) -> None:
        """Fecha o cliente HTTP interno (se foi criado aqui)."""
        if self._http is not None and self._owns_http:
            await self._http.aclose()
            self._http = None

    def _build_payload(self, prompt: str) -> dict[str, Any]:
        return {
            "model": self.model,
            "messages": [{"role": "user", "content": prompt}],
        }

    async def complete(self, prompt: str) -> str:
        """Envia o prompt e retorna o texto bruto da resposta.

        Args:
            prompt: Prompt renderizado pelo PromptBuilder

        Returns:
            Conteúdo de choices[0].message.content (sem trim)

        Raises:
            CompletionFailure: Após esgotar as tentativas ou o prazo total,
                ou de imediato para falhas não repetíveis
        """
        try:
            return await asyncio.wait_for(self._complete_with_retry(prompt), timeout=self.deadline)
        except asyncio.TimeoutError as e:
            raise CompletionFailure(
                CompletionFailureKind.TIMEOUT,
                f"Completion excedeu o prazo total de {self.deadline}s",
            ) from e

    async def _complete_with_retry(self, prompt: str) -> str:
        retrying = AsyncRetrying(
            stop=stop_after_attempt(self.max_attempts) | stop_after_delay(self.deadline),
            wait=wait_exponential(multiplier=self.backoff, max=30),
            retry=retry_if_exception(_is_retryable),
            before_sleep=_log_retry,
            reraise=True,
        )

        async for attempt in retrying:
            with attempt:
                content = await self._complete_once(prompt)

        return content

    async def _complete_once(self, prompt: str) -> str:
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

        try:
            response = await asyncio.wait_for(
                self._get_http().post(self.url, json=self._build_payload(prompt), headers=headers),
                timeout=self.timeout,
            )
        except (asyncio.TimeoutError, httpx.TimeoutException) as e:
            raise CompletionFailure(
                CompletionFailureKind.TIMEOUT,
                f"Completion excedeu {self.timeout}s",
            ) from e
        except httpx.DecodingError as e:
            raise CompletionFailure(
                CompletionFailureKind.MALFORMED_ENVELOPE,
                f"Corpo da resposta não pôde ser decodificado: {e}",
            ) from e
        except httpx.RequestError as e:
            raise CompletionFailure(
                CompletionFailureKind.UNREACHABLE,
                f"Serviço de completion inacessível: {e}",
            ) from e

        if not response.is_success:
            raise CompletionFailure(
                CompletionFailureKind.HTTP_STATUS,
                f"Serviço de completion respondeu {response.status_code}",
                status_code=response.status_code,
            )

        return self._extract_content(response)

    @staticmethod
    def _extract_content(response: httpx.Response) -> str:
        """Extrai choices[0].message.content do envelope."""
        try:
            data = response.json()
        except ValueError as e:
            raise CompletionFailure(
                CompletionFailureKind.MALFORMED_ENVELOPE,
                "Resposta do serviço de completion não é JSON",
            ) from e

        choices = data.get("choices") if isinstance(data, dict) else None
        if not isinstance(choices, list) or not choices:
            raise CompletionFailure(
                CompletionFailureKind.MALFORMED_ENVELOPE,
                "Resposta sem 'choices'",
            )

        first = choices[0]
        message = first.get("message") if isinstance(first, dict) else None
        content = message.get("content") if isinstance(message, dict) else None
        if not isinstance(content, str):
            raise CompletionFailure(
                CompletionFailureKind.MALFORMED_ENVELOPE,
                "Resposta sem 'choices[0].message.content'",
            )

        return content
