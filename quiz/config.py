"""Quiz Config - Configuração explícita do pipeline de quiz.

Carregada uma vez no start do processo (QuizConfig.from_env) e passada
para as factories; nenhum módulo lê variáveis de ambiente por conta própria.
"""

import os
from dataclasses import dataclass

DEFAULT_COMPLETION_URL = "https://api.mistral.ai/v1/chat/completions"
DEFAULT_COMPLETION_MODEL = "mistral-tiny"


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    return int(value) if value else default


def _env_float(name: str, default: float | None) -> float | None:
    value = os.getenv(name)
    return float(value) if value else default


@dataclass(frozen=True)
class QuizConfig:
    """Parâmetros do serviço de completion, retry e armazenamento.

    Attributes:
        completion_url: Endpoint de chat completions (formato OpenAI/Mistral)
        completion_api_key: Bearer token do serviço
        completion_model: Nome do modelo
        completion_timeout: Teto de latência por tentativa (segundos)
        completion_max_attempts: Tentativas totais (1 = sem retry)
        completion_backoff: Espera base do backoff exponencial (segundos)
        completion_deadline: Prazo total da chamada, com retries e esperas
            (None = completion_timeout * completion_max_attempts)
        question_count: Número de questões pedidas ao modelo
        storage_id: ID do banco AgentFS
        storage_timeout: Teto de latência das operações de KV (segundos)
    """

    completion_url: str = DEFAULT_COMPLETION_URL
    completion_api_key: str = ""
    completion_model: str = DEFAULT_COMPLETION_MODEL
    completion_timeout: float = 60.0
    completion_max_attempts: int = 3
    completion_backoff: float = 1.0
    completion_deadline: float | None = None
    question_count: int = 21
    storage_id: str = "quiz-service"
    storage_timeout: float = 10.0

    def __post_init__(self):
        if self.completion_max_attempts < 1:
            raise ValueError("completion_max_attempts deve ser >= 1")
        if self.completion_timeout <= 0:
            raise ValueError("completion_timeout deve ser > 0")
        if self.completion_deadline is not None and self.completion_deadline <= 0:
            raise ValueError("completion_deadline deve ser > 0")
        if self.question_count < 1:
            raise ValueError("question_count deve ser >= 1")

    @classmethod
    def from_env(cls) -> "QuizConfig":
        """Cria configuração a partir das variáveis de ambiente."""
        return cls(
            completion_url=os.getenv("COMPLETION_API_URL", DEFAULT_COMPLETION_URL),
            # MISTRAL_API_KEY mantido por compatibilidade com deploys antigos
            completion_api_key=os.getenv("COMPLETION_API_KEY")
            or os.getenv("MISTRAL_API_KEY", ""),
            completion_model=os.getenv("COMPLETION_MODEL", DEFAULT_COMPLETION_MODEL),
            completion_timeout=_env_float("COMPLETION_TIMEOUT_SECONDS", 60.0),
            completion_max_attempts=_env_int("COMPLETION_MAX_ATTEMPTS", 3),
            completion_backoff=_env_float("COMPLETION_BACKOFF_SECONDS", 1.0),
            completion_deadline=_env_float("COMPLETION_DEADLINE_SECONDS", None),
            question_count=_env_int("QUIZ_QUESTION_COUNT", 21),
            storage_id=os.getenv("QUIZ_STORAGE_ID", "quiz-service"),
            storage_timeout=_env_float("STORAGE_TIMEOUT_SECONDS", 10.0),
        )
