"""Quiz Errors - Taxonomia de falhas do pipeline de quiz."""

from .models.enums import CompletionFailureKind


class QuizError(Exception):
    """Erro base do módulo de quiz."""


class EmptyContent(QuizError):
    """Conteúdo vazio enviado para geração."""

    def __init__(self, message: str = "Content is required"):
        super().__init__(message)


class CompletionFailure(QuizError):
    """Falha ao chamar o serviço de completion.

    Attributes:
        kind: Tipo da falha (unreachable, timeout, http_status, malformed_envelope)
        status_code: Status HTTP quando kind == http_status
    """

    def __init__(
        self,
        kind: CompletionFailureKind,
        message: str,
        status_code: int | None = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.status_code = status_code

    @property
    def retryable(self) -> bool:
        """Se vale a pena repetir a chamada."""
        if self.kind in (CompletionFailureKind.UNREACHABLE, CompletionFailureKind.TIMEOUT):
            return True
        if self.kind == CompletionFailureKind.HTTP_STATUS and self.status_code is not None:
            return self.status_code == 429 or self.status_code >= 500
        return False


class InvalidQuizFormat(QuizError):
    """Resposta do modelo não segue o schema de quiz."""

    def __init__(self, reason: str):
        super().__init__(f"Invalid quiz format: {reason}")
        self.reason = reason


class QuizNotFound(QuizError):
    def __init__(self, quiz_id: str):
        super().__init__(f"Quiz {quiz_id} not found")
        self.quiz_id = quiz_id


class SubmissionNotFound(QuizError):
    def __init__(self, user_id: str, quiz_id: str):
        super().__init__(f"No submission of quiz {quiz_id} by user {user_id}")
        self.user_id = user_id
        self.quiz_id = quiz_id


class PersistenceFailure(QuizError):
    """Erro na camada de armazenamento (AgentFS)."""
