"""Core module - shared state and helper functions."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Optional

from quiz.config import QuizConfig
from quiz.engine.quiz_engine import QuizEngine
from quiz.llm.client import CompletionClient
from quiz.llm.factory import LLMClientFactory
from quiz.prompts.templates import PromptBuilder
from quiz.storage.quiz_store import QuizStore
from quiz.storage.submission_store import SubmissionStore

if TYPE_CHECKING:
    from agentfs_sdk import AgentFS

logger = logging.getLogger(__name__)

# =============================================================================
# PROCESS SINGLETONS
# =============================================================================

# Criados sob demanda no primeiro request e fechados no shutdown (lifespan)
config: Optional[QuizConfig] = None
agentfs: Optional[AgentFS] = None
completion_client: Optional[CompletionClient] = None
engine: Optional[QuizEngine] = None

_init_lock = asyncio.Lock()


def get_config() -> QuizConfig:
    """Get process configuration (loaded once from env)."""
    global config
    if config is None:
        config = QuizConfig.from_env()
    return config


async def get_agentfs() -> AgentFS:
    """Get AgentFS instance."""
    global agentfs
    if agentfs is None:
        from agentfs_sdk import AgentFS, AgentFSOptions

        cfg = get_config()
        agentfs = await AgentFS.open(AgentFSOptions(id=cfg.storage_id))
        logger.info(f"AgentFS aberto: {cfg.storage_id}")
    return agentfs


async def get_engine() -> QuizEngine:
    """Get QuizEngine wired with storage and completion client."""
    global engine, completion_client

    async with _init_lock:
        if engine is None:
            cfg = get_config()
            afs = await get_agentfs()

            completion_client = LLMClientFactory(cfg).create_client()
            engine = QuizEngine(
                quiz_store=QuizStore(afs, timeout=cfg.storage_timeout),
                submission_store=SubmissionStore(afs, timeout=cfg.storage_timeout),
                completion_client=completion_client,
                prompt_builder=PromptBuilder(question_count=cfg.question_count),
            )

    return engine


async def close() -> None:
    """Release HTTP client and AgentFS handle."""
    global agentfs, completion_client, engine

    if completion_client is not None:
        await completion_client.aclose()
        completion_client = None

    if agentfs is not None:
        await agentfs.close()
        agentfs = None
        logger.info("AgentFS fechado")

    engine = None
