"""Service test fixtures — in-memory store + FastAPI test client, SQLite for SQL store.

Invariants:
    - Every test gets a fresh InMemoryKeyValueStore behind get_store
    - SQL store tests get a fresh in-memory SQLite database
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from fontgate.api.dependencies import get_store
from fontgate.db.base import Base
from fontgate.infrastructure.kv_store import InMemoryKeyValueStore, SqlKeyValueStore
from fontgate.main import app
import fontgate.models  # noqa: F401

ALLOWED_ORIGIN = "https://cdn.example.com"
FONT_BYTES = b"wOF2\x00\x01\x00\x00" + bytes(range(256))


@pytest.fixture
def allowed_origin():
    return ALLOWED_ORIGIN


@pytest.fixture
def font_bytes():
    return FONT_BYTES


@pytest.fixture
def store():
    return InMemoryKeyValueStore()


@pytest.fixture
async def client(store):
    """FastAPI test client with the store dependency overridden."""
    async def override_get_store():
        yield store

    app.dependency_overrides[get_store] = override_get_store
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
async def seeded_store(store):
    """Store with example.com whitelisted and one font."""
    await store.put("domains", '["example.com"]')
    await store.put("myfont.woff2", FONT_BYTES)
    return store


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def sql_store(test_session_factory):
    async with test_session_factory() as session:
        yield SqlKeyValueStore(session)
