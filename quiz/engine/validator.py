"""Quiz Validator - Parser estrito da resposta do modelo."""

import json
import logging
from dataclasses import dataclass, field
from typing import Any

from ..errors import InvalidQuizFormat
from ..models.schemas import OPTIONS_PER_QUESTION, QuizQuestion

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValidationResult:
    """Resultado da validação: ok com questões, ou erro com motivo."""

    ok: bool
    questions: list[QuizQuestion] = field(default_factory=list)
    reason: str = ""

    @classmethod
    def success(cls, questions: list[QuizQuestion]) -> "ValidationResult":
        return cls(ok=True, questions=questions)

    @classmethod
    def failure(cls, reason: str) -> "ValidationResult":
        return cls(ok=False, reason=reason)


class QuizValidator:
    """Converte o texto bruto do modelo em questões validadas.

    Única barreira contra respostas fora do formato (prosa, JSON truncado,
    mudança de schema). É estrita: qualquer desvio rejeita o quiz inteiro,
    nunca há aceitação parcial.

    O texto só passa por trim; cercas de markdown ou prosa ao redor do JSON
    são rejeitadas.

    Example:
        >>> validator = QuizValidator()
        >>> questions = validator.parse('[{"question": "2+2?", ...}]')
    """

    def validate(self, raw_text: str) -> ValidationResult:
        """Valida o texto e retorna um resultado tagueado (sem exceção)."""
        if not isinstance(raw_text, str):
            return ValidationResult.failure("reply is not text")

        try:
            data = json.loads(raw_text.strip())
        except json.JSONDecodeError as e:
            return ValidationResult.failure(f"reply is not valid JSON ({e.msg})")
        except RecursionError:
            return ValidationResult.failure("reply is nested too deeply")

        if not isinstance(data, list):
            return ValidationResult.failure("top-level value is not an array")
        if not data:
            return ValidationResult.failure("array has no questions")

        questions = []
        for index, item in enumerate(data, start=1):
            reason = self._check_item(item)
            if reason:
                return ValidationResult.failure(f"question {index}: {reason}")
            questions.append(
                QuizQuestion(
                    id=f"q{index}",
                    question=item["question"],
                    options=list(item["options"]),
                    answer=item["answer"],
                )
            )

        return ValidationResult.success(questions)

    def parse(self, raw_text: str) -> list[QuizQuestion]:
        """Valida o texto e retorna as questões.

        Args:
            raw_text: Conteúdo bruto devolvido pelo serviço de completion

        Returns:
            Lista de questões na ordem recebida, com ids q1..qN

        Raises:
            InvalidQuizFormat: Se qualquer parte não seguir o schema
        """
        result = self.validate(raw_text)
        if not result.ok:
            logger.warning(f"Resposta do modelo rejeitada: {result.reason}")
            raise InvalidQuizFormat(result.reason)
        return result.questions

    @staticmethod
    def _check_item(item: Any) -> str | None:
        """Retorna o motivo da rejeição, ou None se o item é válido."""
        if not isinstance(item, dict):
            return "element is not an object"

        question = item.get("question")
        if not isinstance(question, str) or not question.strip():
            return "missing non-empty 'question'"

        options = item.get("options")
        if not isinstance(options, list):
            return "missing 'options' array"
        if len(options) != OPTIONS_PER_QUESTION:
            return f"'options' must have {OPTIONS_PER_QUESTION} elements, got {len(options)}"
        if not all(isinstance(opt, str) and opt.strip() for opt in options):
            return "'options' must be non-empty strings"
        if len(set(options)) != len(options):
            return "'options' must be distinct"

        answer = item.get("answer")
        if not isinstance(answer, str) or not answer.strip():
            return "missing 'answer'"
        if answer not in options:
            return "'answer' is not one of 'options'"

        return None
