"""Base de repositórios sobre o KV store do AgentFS."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable
from typing import TYPE_CHECKING, Any, TypeVar

if TYPE_CHECKING:
    from agentfs_sdk import AgentFS

from ..errors import PersistenceFailure

logger = logging.getLogger(__name__)

T = TypeVar("T")


class AgentFSRepository:
    """Acesso ao KV do AgentFS com timeout e erros tipados.

    Cada registro é gravado com um único ``kv.set``, que é atômico: leitores
    nunca veem um registro pela metade.
    """

    KEY_PREFIX = ""

    def __init__(self, agentfs: AgentFS, timeout: float = 10.0):
        """Inicializa repositório com instância do AgentFS.

        Args:
            agentfs: Instância configurada do AgentFS
            timeout: Teto de latência por operação (segundos)
        """
        self.agentfs = agentfs
        self.timeout = timeout

    async def _run(self, operation: Awaitable[T], action: str) -> T:
        try:
            return await asyncio.wait_for(operation, timeout=self.timeout)
        except asyncio.TimeoutError as e:
            logger.error(f"Timeout no KV store ({action})")
            raise PersistenceFailure(f"Storage timeout during {action}") from e
        except Exception as e:
            logger.error(f"Erro no KV store ({action}): {e}")
            raise PersistenceFailure(f"Storage error during {action}: {e}") from e

    async def _set(self, key: str, value: dict[str, Any]) -> None:
        await self._run(self.agentfs.kv.set(key, value), f"set {key}")

    async def _get(self, key: str) -> Any:
        return await self._run(self.agentfs.kv.get(key), f"get {key}")

    async def _list_keys(self, prefix: str) -> list[str]:
        entries = await self._run(self.agentfs.kv.list(prefix=prefix), f"list {prefix}")

        keys = []
        for entry in entries or []:
            key = entry.get("key", "") if isinstance(entry, dict) else str(entry)
            if key.startswith(prefix):
                keys.append(key)
        return keys
