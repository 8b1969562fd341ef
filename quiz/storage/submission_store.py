"""Submission Store - Persistência de submissões no AgentFS."""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone

from pydantic import ValidationError

from ..errors import PersistenceFailure, SubmissionNotFound
from ..models.schemas import AnswerRecord, Submission
from .base import AgentFSRepository

logger = logging.getLogger(__name__)


class SubmissionStore(AgentFSRepository):
    """Repositório de submissões, chaveado por (quiz, usuário).

    Política de reenvio: append. Cada correção vira um registro próprio,
    então envios concorrentes do mesmo usuário nunca se sobrescrevem;
    ``find_one`` devolve o mais recente.

    Estrutura de chaves:
        - submission:{quiz_id}:{user_id}:{submission_id} -> Submission
    """

    KEY_PREFIX = "submission"

    def _prefix(self, quiz_id: str, user_id: str) -> str:
        return f"{self.KEY_PREFIX}:{quiz_id}:{user_id}:"

    def _submission_key(self, quiz_id: str, user_id: str, submission_id: str) -> str:
        return f"{self._prefix(quiz_id, user_id)}{submission_id}"

    async def create(
        self,
        user_id: str,
        quiz_id: str,
        answer_records: list[AnswerRecord],
        score: int,
        total_questions: int,
    ) -> Submission:
        """Persiste uma submissão corrigida.

        O score precisa bater com os registros (validado pelo schema).

        Returns:
            Submission persistida
        """
        submission = Submission(
            id=uuid.uuid4().hex,
            user=user_id,
            quiz=quiz_id,
            answers=answer_records,
            score=score,
            total_questions=total_questions,
            submitted_at=datetime.now(timezone.utc),
        )

        key = self._submission_key(quiz_id, user_id, submission.id)
        await self._set(key, submission.model_dump(mode="json", by_alias=True))
        logger.info(f"Submissão salva: {submission.id} (quiz {quiz_id}, score {score})")
        return submission

    async def list_for_user(self, user_id: str, quiz_id: str) -> list[Submission]:
        """Todas as submissões do usuário para o quiz, mais recente primeiro."""
        submissions = []
        for key in await self._list_keys(self._prefix(quiz_id, user_id)):
            data = await self._get(key)
            if not data:
                continue
            try:
                submission = Submission.model_validate(data)
            except ValidationError as e:
                raise PersistenceFailure(f"Submissão {key} armazenada está corrompida") from e

            # O prefixo de um user_id pode ser prefixo de outro ("a" e "a:b")
            if submission.user == user_id and submission.quiz == quiz_id:
                submissions.append(submission)

        submissions.sort(key=lambda s: (s.submitted_at, s.id), reverse=True)
        return submissions

    async def find_one(self, user_id: str, quiz_id: str) -> Submission:
        """Submissão mais recente do usuário para o quiz.

        Raises:
            SubmissionNotFound: Se o usuário nunca enviou o quiz
        """
        submissions = await self.list_for_user(user_id, quiz_id)
        if not submissions:
            raise SubmissionNotFound(user_id, quiz_id)
        return submissions[0]
