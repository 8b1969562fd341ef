"""Quiz Router - Endpoints FastAPI."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Header, HTTPException

import app_state

from .engine.quiz_engine import QuizEngine
from .errors import (
    CompletionFailure,
    EmptyContent,
    InvalidQuizFormat,
    PersistenceFailure,
    QuizNotFound,
    SubmissionNotFound,
)
from .models.schemas import (
    GenerateQuizRequest,
    GenerateQuizResponse,
    PreviousQuizRequest,
    PreviousQuizResponse,
    Quiz,
    SubmitQuizRequest,
    SubmitQuizResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/quiz", tags=["Quiz"])


# =============================================================================
# DEPENDENCY INJECTION
# =============================================================================


async def get_quiz_engine() -> QuizEngine:
    """Dependency para obter QuizEngine configurado."""
    return await app_state.get_engine()


def get_current_user_id(x_user_id: str | None = Header(default=None)) -> str:
    """Identidade do usuário autenticado.

    O middleware de autenticação fica fora deste serviço e injeta o ID do
    usuário no header X-User-Id.
    """
    if not x_user_id:
        raise HTTPException(status_code=401, detail="Authentication required")
    return x_user_id


async def _generate(engine: QuizEngine, content: str | None, owner_id: str) -> Quiz:
    """Roda o pipeline de geração convertendo erros em HTTPException."""
    try:
        return await engine.generate_quiz(content, owner_id)
    except EmptyContent as e:
        raise HTTPException(status_code=400, detail="Content is required") from e
    except InvalidQuizFormat as e:
        logger.error(f"Quiz inválido retornado pelo modelo: {e.reason}")
        raise HTTPException(status_code=500, detail="Quiz generation failed. Try again") from e
    except CompletionFailure as e:
        logger.error(f"Falha no serviço de completion ({e.kind.value}): {e}")
        raise HTTPException(status_code=500, detail="Internal Server Error") from e
    except PersistenceFailure as e:
        logger.error(f"Falha ao salvar quiz: {e}")
        raise HTTPException(status_code=500, detail="Internal Server Error") from e


# =============================================================================
# GENERATION ENDPOINTS
# =============================================================================


@router.post("/generate-quiz", response_model=GenerateQuizResponse)
async def generate_quiz(
    request: GenerateQuizRequest,
    engine: QuizEngine = Depends(get_quiz_engine),
    user_id: str = Depends(get_current_user_id),
):
    """Gera um quiz a partir de um tópico ou texto.

    - Monta o prompt (21 questões, 4 alternativas)
    - Chama o serviço de completion
    - Valida estritamente o JSON retornado
    - Persiste o quiz para o usuário autenticado
    """
    quiz = await _generate(engine, request.content, user_id)

    logger.info(f"[Quiz {quiz.id}] Gerado com {len(quiz.questions)} questões")

    return GenerateQuizResponse(quiz=quiz.questions, quiz_id=quiz.id)


@router.post("/generate-quiz-content", response_model=Quiz)
async def generate_quiz_content(
    request: GenerateQuizRequest,
    engine: QuizEngine = Depends(get_quiz_engine),
    user_id: str = Depends(get_current_user_id),
):
    """Chamada interna: gera o quiz e retorna o registro completo.

    Usada por outros serviços (ex: upload de PDF) que já extrairam o texto.
    O dono é o ``userId`` do corpo, ou o usuário autenticado.
    """
    return await _generate(engine, request.content, request.user_id or user_id)


@router.get("/{quiz_id}", response_model=Quiz)
async def get_quiz(
    quiz_id: str,
    engine: QuizEngine = Depends(get_quiz_engine),
    _user_id: str = Depends(get_current_user_id),
):
    """Retorna um quiz salvo (questões e respostas corretas)."""
    try:
        return await engine.get_quiz(quiz_id)
    except QuizNotFound as e:
        raise HTTPException(status_code=404, detail="Quiz not found") from e


# =============================================================================
# SUBMISSION ENDPOINTS
# =============================================================================


@router.post("/submit-quiz", response_model=SubmitQuizResponse, status_code=201)
async def submit_quiz(
    request: SubmitQuizRequest,
    engine: QuizEngine = Depends(get_quiz_engine),
    user_id: str = Depends(get_current_user_id),
):
    """Corrige e salva as respostas do usuário.

    - Associa cada resposta à questão (questionId, ou texto exato)
    - Correção por igualdade de conjuntos
    - Score recalculado no servidor
    """
    try:
        submission = await engine.submit(
            user_id=user_id,
            quiz_id=request.quiz_id,
            answers=request.answers,
            claimed_score=request.score,
        )
    except QuizNotFound as e:
        raise HTTPException(status_code=404, detail="Quiz not found") from e
    except PersistenceFailure as e:
        logger.error(f"Falha ao salvar submissão: {e}")
        raise HTTPException(status_code=500, detail="Failed to submit quiz") from e

    return SubmitQuizResponse(submission=submission)


@router.post("/previous-quiz", response_model=PreviousQuizResponse)
async def previous_quiz(
    request: PreviousQuizRequest,
    engine: QuizEngine = Depends(get_quiz_engine),
    user_id: str = Depends(get_current_user_id),
):
    """Retorna a submissão mais recente do usuário para o quiz."""
    target_user = request.user_id or user_id
    if not request.quiz_id or not target_user:
        raise HTTPException(status_code=400, detail="Quiz ID and User ID are required")

    try:
        submission = await engine.previous_submission(target_user, request.quiz_id)
    except SubmissionNotFound as e:
        raise HTTPException(status_code=400, detail="No previous submission found") from e
    except PersistenceFailure as e:
        logger.error(f"Falha ao buscar submissão: {e}")
        raise HTTPException(status_code=500, detail="Internal Server Error") from e

    return PreviousQuizResponse(data=submission)
