# =============================================================================
# TESTES - Quiz Store Module
# =============================================================================
# Testes unitarios para persistencia de quizzes no AgentFS
# =============================================================================

import asyncio
from unittest.mock import AsyncMock

import pytest


class TestQuizStoreCreate:
    """Testes para QuizStore.create."""

    @pytest.mark.asyncio
    async def test_create_persists_single_record(self, mock_agentfs_with_data, sample_questions):
        """Verifica que o quiz inteiro e gravado numa unica chave."""
        from quiz.storage.quiz_store import QuizStore

        store = QuizStore(mock_agentfs_with_data)

        quiz = await store.create("Quiz on X", "X", sample_questions, "user-1")

        assert list(mock_agentfs_with_data._storage) == [f"quiz:{quiz.id}"]
        stored = mock_agentfs_with_data._storage[f"quiz:{quiz.id}"]
        assert stored["createdBy"] == "user-1"
        assert len(stored["questions"]) == 3

    @pytest.mark.asyncio
    async def test_create_assigns_unique_ids(self, mock_agentfs_with_data, sample_questions):
        from quiz.storage.quiz_store import QuizStore

        store = QuizStore(mock_agentfs_with_data)

        first = await store.create("Quiz on X", "X", sample_questions, "user-1")
        second = await store.create("Quiz on X", "X", sample_questions, "user-1")

        assert first.id != second.id
        assert first.created_at.tzinfo is not None

    @pytest.mark.asyncio
    async def test_create_rejects_empty_questions(self, mock_agentfs_with_data):
        """Verifica que quiz sem questoes nunca e gravado."""
        from pydantic import ValidationError

        from quiz.storage.quiz_store import QuizStore

        store = QuizStore(mock_agentfs_with_data)

        with pytest.raises(ValidationError):
            await store.create("Quiz on X", "X", [], "user-1")

        assert mock_agentfs_with_data._storage == {}

    @pytest.mark.asyncio
    async def test_create_kv_error(self, mock_agentfs, sample_questions):
        """Verifica que erro do KV vira PersistenceFailure."""
        from quiz.errors import PersistenceFailure
        from quiz.storage.quiz_store import QuizStore

        mock_agentfs.kv.set = AsyncMock(side_effect=RuntimeError("disk full"))
        store = QuizStore(mock_agentfs)

        with pytest.raises(PersistenceFailure) as exc_info:
            await store.create("Quiz on X", "X", sample_questions, "user-1")

        assert "disk full" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_create_kv_timeout(self, mock_agentfs, sample_questions):
        """Verifica timeout do KV."""
        from quiz.errors import PersistenceFailure
        from quiz.storage.quiz_store import QuizStore

        async def slow_set(key, value):
            await asyncio.sleep(1)

        mock_agentfs.kv.set = slow_set
        store = QuizStore(mock_agentfs, timeout=0.01)

        with pytest.raises(PersistenceFailure) as exc_info:
            await store.create("Quiz on X", "X", sample_questions, "user-1")

        assert "timeout" in str(exc_info.value)


class TestQuizStoreFind:
    """Testes para QuizStore.find_by_id."""

    @pytest.mark.asyncio
    async def test_round_trip(self, mock_agentfs_with_data, sample_questions):
        """Verifica que o quiz lido e igual ao gravado."""
        from quiz.storage.quiz_store import QuizStore

        store = QuizStore(mock_agentfs_with_data)
        created = await store.create("Quiz on X", "X", sample_questions, "user-1")

        loaded = await store.find_by_id(created.id)

        assert loaded.id == created.id
        assert loaded.questions == sample_questions
        assert loaded.created_by == "user-1"

    @pytest.mark.asyncio
    async def test_find_missing(self, mock_agentfs):
        from quiz.errors import QuizNotFound
        from quiz.storage.quiz_store import QuizStore

        store = QuizStore(mock_agentfs)

        with pytest.raises(QuizNotFound) as exc_info:
            await store.find_by_id("nope")

        assert exc_info.value.quiz_id == "nope"
        mock_agentfs.kv.get.assert_called_once_with("quiz:nope")

    @pytest.mark.asyncio
    async def test_find_corrupted_record(self, mock_agentfs):
        """Verifica registro corrompido."""
        from quiz.errors import PersistenceFailure
        from quiz.storage.quiz_store import QuizStore

        mock_agentfs.kv.get = AsyncMock(return_value={"id": "quiz-1", "questions": "oops"})
        store = QuizStore(mock_agentfs)

        with pytest.raises(PersistenceFailure):
            await store.find_by_id("quiz-1")
