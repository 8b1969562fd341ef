"""Quiz Enums - Tipos de falha do serviço de completion."""

from enum import Enum


class CompletionFailureKind(str, Enum):
    """Categorias de falha na chamada ao modelo."""

    UNREACHABLE = "unreachable"  # Erro de rede/conexão
    TIMEOUT = "timeout"  # Estourou o limite de latência
    HTTP_STATUS = "http_status"  # Resposta não-2xx
    MALFORMED_ENVELOPE = "malformed_envelope"  # Respondeu, mas sem choices[0].message.content
