"""Quiz Store - Persistência de quizzes no AgentFS."""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone

from pydantic import ValidationError

from ..errors import PersistenceFailure, QuizNotFound
from ..models.schemas import Quiz, QuizQuestion
from .base import AgentFSRepository

logger = logging.getLogger(__name__)


class QuizStore(AgentFSRepository):
    """Repositório de quizzes sobre o KV store do AgentFS.

    O quiz inteiro (com todas as questões) é um único registro, então a
    gravação é tudo-ou-nada.

    Estrutura de chaves:
        - quiz:{quiz_id} -> Quiz completo

    Example:
        >>> store = QuizStore(agentfs)
        >>> quiz = await store.create("Quiz on X", "X", questions, "user-1")
        >>> loaded = await store.find_by_id(quiz.id)
    """

    KEY_PREFIX = "quiz"

    def _quiz_key(self, quiz_id: str) -> str:
        """Gera chave para o quiz."""
        return f"{self.KEY_PREFIX}:{quiz_id}"

    async def create(
        self,
        title: str,
        content: str,
        questions: list[QuizQuestion],
        owner_id: str,
    ) -> Quiz:
        """Cria e persiste um quiz.

        Args:
            title: Título do quiz
            content: Tópico ou texto de origem
            questions: Questões já validadas (não vazia)
            owner_id: ID do usuário criador

        Returns:
            Quiz persistido, com id e created_at atribuídos
        """
        quiz = Quiz(
            id=uuid.uuid4().hex,
            title=title,
            content=content,
            questions=questions,
            created_by=owner_id,
            created_at=datetime.now(timezone.utc),
        )

        await self._set(self._quiz_key(quiz.id), quiz.model_dump(mode="json", by_alias=True))
        logger.info(f"Quiz salvo: {quiz.id} ({len(quiz.questions)} questões)")
        return quiz

    async def find_by_id(self, quiz_id: str) -> Quiz:
        """Carrega um quiz.

        Raises:
            QuizNotFound: Se não existir
            PersistenceFailure: Se o registro estiver corrompido
        """
        data = await self._get(self._quiz_key(quiz_id))

        if not data:
            logger.debug(f"Quiz não encontrado: {quiz_id}")
            raise QuizNotFound(quiz_id)

        try:
            return Quiz.model_validate(data)
        except ValidationError as e:
            raise PersistenceFailure(f"Quiz {quiz_id} armazenado está corrompido") from e
