"""Request Dependencies — per-request KeyValueStore selection.

Invariants:
    - memory backend: one process-wide InMemoryKeyValueStore
    - database backend: one SqlKeyValueStore per request, session closed after response
"""

from typing import AsyncGenerator

import fontgate.infrastructure.database as db_module
from fontgate.config import get_settings
from fontgate.core.domain_types import StoreBackend
from fontgate.core.repository_protocols import KeyValueStore
from fontgate.infrastructure.kv_store import InMemoryKeyValueStore, SqlKeyValueStore

memory_store = InMemoryKeyValueStore()


async def get_store() -> AsyncGenerator[KeyValueStore, None]:
    """FastAPI dependency yielding the configured store."""
    if get_settings().store_backend == StoreBackend.MEMORY:
        yield memory_store
        return
    if not db_module.db_manager:
        raise RuntimeError("Database not initialized")
    async with db_module.db_manager.session() as session:
        yield SqlKeyValueStore(session)
