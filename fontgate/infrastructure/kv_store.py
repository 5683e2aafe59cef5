"""Key-Value Store Implementations — SQL-backed and in-memory KeyValueStore.

Invariants:
    - Both implementations satisfy core/repository_protocols.KeyValueStore
    - Text values are UTF-8 encoded on put and decoded on get
    - put is a full replace (upsert); last writer wins
    - SqlKeyValueStore commits every put; reads never write
    - SQLAlchemy errors leave this module as StoreError

Design Decisions:
    - One SqlKeyValueStore per request, bound to that request's AsyncSession
    - InMemoryKeyValueStore keeps bytes in a dict: tests and STORE_BACKEND=memory
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from fontgate.core.errors import StoreError, ErrorContext
from fontgate.models.kv_entry import KeyValueEntry

logger = logging.getLogger(__name__)


def _to_bytes(value: str | bytes) -> bytes:
    return value.encode("utf-8") if isinstance(value, str) else bytes(value)


def _to_text(value: bytes | None) -> str | None:
    return value.decode("utf-8") if value is not None else None


class SqlKeyValueStore:
    """KeyValueStore over the kv_entries table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    @asynccontextmanager
    async def _mapped_errors(
        self, operation: str, key: str | None = None,
    ) -> AsyncGenerator[None, None]:
        try:
            yield
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(
                f"Store {operation} failed: {e}", extra={"font_key": key},
            )
            raise StoreError(
                "Database operation failed", operation,
                ErrorContext(font_key=key),
            ) from e

    async def get(self, key: str) -> str | None:
        return _to_text(await self.get_binary(key))

    async def get_binary(self, key: str) -> bytes | None:
        async with self._mapped_errors("get", key):
            result = await self.db.execute(
                select(KeyValueEntry.value).where(KeyValueEntry.key == key),
            )
            return result.scalar_one_or_none()

    async def put(self, key: str, value: str | bytes) -> None:
        async with self._mapped_errors("put", key):
            entry = await self.db.get(KeyValueEntry, key)
            if entry is None:
                self.db.add(KeyValueEntry(key=key, value=_to_bytes(value)))
            else:
                entry.value = _to_bytes(value)
            await self.db.commit()

    async def list_keys(self) -> list[str]:
        async with self._mapped_errors("list"):
            result = await self.db.execute(
                select(KeyValueEntry.key).order_by(KeyValueEntry.key),
            )
            return list(result.scalars().all())


class InMemoryKeyValueStore:
    """Process-local KeyValueStore. Insertion-ordered listing."""

    def __init__(self, initial: dict[str, str | bytes] | None = None):
        self._data: dict[str, bytes] = {
            k: _to_bytes(v) for k, v in (initial or {}).items()
        }

    async def get(self, key: str) -> str | None:
        return _to_text(self._data.get(key))

    async def get_binary(self, key: str) -> bytes | None:
        return self._data.get(key)

    async def put(self, key: str, value: str | bytes) -> None:
        self._data[key] = _to_bytes(value)

    async def list_keys(self) -> list[str]:
        return list(self._data)
