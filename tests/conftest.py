"""Root conftest — shared test configuration and in-memory database fixtures.

Invariants:
    - Every test that asks for a database gets a fresh in-memory SQLite schema
    - Tables come from Base.metadata, the same metadata alembic migrates

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for repository
      and route tests (PostgreSQL-specific features not exercised here)
"""

import os

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)

# Tests never reach a real PostgreSQL instance
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")

from marketplace.db.base import Base  # noqa: E402
import marketplace.models  # noqa: E402,F401


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
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session
