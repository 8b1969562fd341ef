"""Quiz Engine - Orquestração de geração, correção e consulta."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ..errors import EmptyContent
from ..llm.client import CompletionClient
from ..models.schemas import Quiz, Submission, SubmittedAnswer
from ..prompts.templates import PromptBuilder
from ..storage.quiz_store import QuizStore
from ..storage.submission_store import SubmissionStore
from .scoring_engine import SubmissionGrader
from .validator import QuizValidator

logger = logging.getLogger(__name__)

MAX_TITLE_CONTENT = 80


def make_title(content: str) -> str:
    """Título padrão do quiz ("Quiz on ...").

    Textos longos (ex: PDF extraído) são cortados para manter o título legível.
    """
    subject = " ".join(content.split())
    if len(subject) > MAX_TITLE_CONTENT:
        subject = subject[: MAX_TITLE_CONTENT - 3].rstrip() + "..."
    return f"Quiz on {subject}"


class QuizEngine:
    """Pipeline completo do quiz.

    Geração: content -> PromptBuilder -> CompletionClient -> QuizValidator -> QuizStore
    Envio: (quiz_id, answers) -> QuizStore -> SubmissionGrader -> SubmissionStore
    Consulta: (quiz_id, user_id) -> SubmissionStore.find_one

    Nenhum resultado parcial: ou o quiz inteiro é validado e salvo, ou a
    chamada falha com um erro tipado (ver quiz.errors).
    """

    def __init__(
        self,
        quiz_store: QuizStore,
        submission_store: SubmissionStore,
        completion_client: CompletionClient,
        prompt_builder: PromptBuilder | None = None,
        validator: QuizValidator | None = None,
        grader: SubmissionGrader | None = None,
    ):
        self.quizzes = quiz_store
        self.submissions = submission_store
        self.client = completion_client
        self.prompt_builder = prompt_builder or PromptBuilder()
        self.validator = validator or QuizValidator()
        self.grader = grader or SubmissionGrader()

    async def generate_quiz(self, content: str | None, owner_id: str) -> Quiz:
        """Gera, valida e persiste um quiz.

        Args:
            content: Tópico ou texto de origem
            owner_id: ID do usuário criador

        Returns:
            Quiz persistido

        Raises:
            EmptyContent: Conteúdo vazio
            CompletionFailure: Serviço de completion falhou
            InvalidQuizFormat: Resposta do modelo fora do schema
            PersistenceFailure: Erro ao salvar
        """
        if content is None or not content.strip():
            raise EmptyContent()

        content = content.strip()
        prompt = self.prompt_builder.build(content)

        logger.info(f"Gerando quiz para usuário {owner_id} ({len(content)} chars de conteúdo)")
        raw_text = await self.client.complete(prompt)
        questions = self.validator.parse(raw_text)

        return await self.quizzes.create(
            title=make_title(content),
            content=content,
            questions=questions,
            owner_id=owner_id,
        )

    async def get_quiz(self, quiz_id: str) -> Quiz:
        return await self.quizzes.find_by_id(quiz_id)

    async def submit(
        self,
        user_id: str,
        quiz_id: str,
        answers: Sequence[SubmittedAnswer],
        claimed_score: int | None = None,
    ) -> Submission:
        """Corrige e persiste uma submissão.

        O score enviado pelo cliente nunca é usado; divergências são logadas.

        Raises:
            QuizNotFound: Quiz inexistente
        """
        quiz = await self.quizzes.find_by_id(quiz_id)
        records, score = self.grader.grade(quiz, answers)

        if claimed_score is not None and claimed_score != score:
            logger.warning(
                f"Score do cliente ({claimed_score}) difere do calculado ({score}) "
                f"no quiz {quiz_id}, usuário {user_id}"
            )

        return await self.submissions.create(
            user_id=user_id,
            quiz_id=quiz_id,
            answer_records=records,
            score=score,
            total_questions=len(quiz.questions),
        )

    async def previous_submission(self, user_id: str, quiz_id: str) -> Submission:
        """Submissão mais recente do usuário (SubmissionNotFound se não houver)."""
        return await self.submissions.find_one(user_id, quiz_id)
