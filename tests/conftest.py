# =============================================================================
# CONFTEST - Fixtures compartilhadas para todos os testes
# =============================================================================
# Centraliza mocks, fixtures e configuracoes comuns
# =============================================================================

import json
import os
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock, patch

import pytest


# =============================================================================
# FIXTURES DE AMBIENTE
# =============================================================================


@pytest.fixture
def clean_env():
    """Limpa variaveis de ambiente para testes isolados."""
    with patch.dict(os.environ, {}, clear=True):
        yield


# =============================================================================
# FIXTURES DO AGENTFS
# =============================================================================


@pytest.fixture
def mock_agentfs():
    """Mock do AgentFS com KV vazio."""
    mock = MagicMock()

    mock.kv = AsyncMock()
    mock.kv.get = AsyncMock(return_value=None)
    mock.kv.set = AsyncMock()
    mock.kv.delete = AsyncMock()
    mock.kv.list = AsyncMock(return_value=[])

    mock.close = AsyncMock()

    return mock


@pytest.fixture
def mock_agentfs_with_data():
    """Mock do AgentFS com KV em memoria."""
    mock = MagicMock()
    _storage = {}

    async def mock_get(key):
        return _storage.get(key)

    async def mock_set(key, value):
        # Copia via JSON, como um store real
        _storage[key] = json.loads(json.dumps(value))

    async def mock_delete(key):
        _storage.pop(key, None)

    async def mock_list(prefix=""):
        return [{"key": k} for k in _storage if k.startswith(prefix)]

    mock.kv = AsyncMock()
    mock.kv.get = mock_get
    mock.kv.set = mock_set
    mock.kv.delete = mock_delete
    mock.kv.list = mock_list
    mock._storage = _storage

    mock.close = AsyncMock()

    return mock


# =============================================================================
# FIXTURES DO QUIZ
# =============================================================================


def make_question_data(index: int) -> dict:
    """Questao no formato retornado pelo modelo."""
    options = [f"Option {index}.{n}" for n in range(1, 5)]
    return {
        "question": f"Question number {index}?",
        "options": options,
        "answer": options[index % 4],
    }


@pytest.fixture
def quiz_reply_factory():
    """Factory de respostas do modelo (array JSON com N questoes)."""

    def _make(count: int = 21) -> str:
        return json.dumps([make_question_data(i) for i in range(1, count + 1)])

    return _make


@pytest.fixture
def arithmetic_question():
    """Questao '2+2?' com resposta unica '4'."""
    from quiz.models.schemas import QuizQuestion

    return QuizQuestion(id="q1", question="2+2?", options=["3", "4", "5", "6"], answer="4")


@pytest.fixture
def sample_questions(arithmetic_question):
    """Lista de questoes validas."""
    from quiz.models.schemas import QuizQuestion

    return [
        arithmetic_question,
        QuizQuestion(
            id="q2",
            question="Capital of France?",
            options=["Paris", "Rome", "Madrid", "Berlin"],
            answer="Paris",
        ),
        QuizQuestion(
            id="q3",
            question="Largest planet?",
            options=["Mars", "Venus", "Jupiter", "Earth"],
            answer="Jupiter",
        ),
    ]


@pytest.fixture
def sample_quiz(sample_questions):
    """Quiz de exemplo para testes."""
    from quiz.models.schemas import Quiz

    return Quiz(
        id="quiz-123",
        title="Quiz on General knowledge",
        content="General knowledge",
        questions=sample_questions,
        created_by="user-1",
        created_at=datetime(2025, 1, 15, 12, 0, 0, tzinfo=timezone.utc),
    )


@pytest.fixture
def mock_completion_client(quiz_reply_factory):
    """CompletionClient falso que retorna um quiz valido."""
    mock = MagicMock()
    mock.complete = AsyncMock(return_value=quiz_reply_factory(21))
    mock.aclose = AsyncMock()
    return mock


@pytest.fixture
def quiz_engine(mock_agentfs_with_data, mock_completion_client):
    """QuizEngine com KV em memoria e completion falso."""
    from quiz.engine.quiz_engine import QuizEngine
    from quiz.storage.quiz_store import QuizStore
    from quiz.storage.submission_store import SubmissionStore

    return QuizEngine(
        quiz_store=QuizStore(mock_agentfs_with_data),
        submission_store=SubmissionStore(mock_agentfs_with_data),
        completion_client=mock_completion_client,
    )


# =============================================================================
# FIXTURES DE COMPLETION (httpx)
# =============================================================================


@pytest.fixture
def completion_envelope():
    """Factory do envelope de chat completion."""

    def _make(content: str) -> dict:
        return {
            "id": "cmpl-123",
            "object": "chat.completion",
            "model": "mistral-tiny",
            "choices": [
                {
                    "index": 0,
                    "message": {"role": "assistant", "content": content},
                    "finish_reason": "stop",
                }
            ],
        }

    return _make


# =============================================================================
# FIXTURES DE LOGGING
# =============================================================================


@pytest.fixture
def capture_logs(caplog):
    """Captura logs para verificacao em testes."""
    import logging

    caplog.set_level(logging.DEBUG)
    return caplog
