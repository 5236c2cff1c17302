"""
Snippets — Test Configuration (conftest.py)
============================================

What:  Shared pytest fixtures for the entire test suite.

Fixture Hierarchy:
    Function-scoped:
    ├── mock_db_session:  AsyncMock session (service unit tests)
    ├── sample_snippet:   A snippet-shaped object for read tests
    ├── session_factory:  async_sessionmaker over a fresh SQLite file
    ├── db_session:       One session from session_factory (store tests)
    └── test_client:      HTTPX AsyncClient on the app, DB dependency
                          pointed at session_factory
"""

import os
import tempfile
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

# Must run before any snippets import: settings and the engine are built
# at import time.
_test_dir = tempfile.mkdtemp(prefix="snippets_test_")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_test_dir}/app.db"
os.environ["STATIC_ROOT"] = _test_dir
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from snippets.database import Base, get_db_session
from snippets.models.snippet import Snippet  # noqa: F401


@pytest.fixture
def mock_db_session():
    """
    A mock async database session.

    Usage:
        async def test_get(mock_db_session):
            mock_db_session.get.return_value = snippet
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.get = AsyncMock()
    session.flush = AsyncMock()
    session.delete = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def sample_snippet():
    return SimpleNamespace(id=1, title="Hello", code="console.log(42)")


@pytest_asyncio.fixture
async def session_factory(tmp_path):
    """
    Session factory over a throwaway SQLite database with the schema created.
    """
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path}/snippets.db")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def test_client(session_factory):
    """
    HTTPX AsyncClient talking to the app through ASGITransport.

    get_db_session is overridden with the same commit / rollback behaviour
    against the per-test database. Redirects are not followed so tests can
    assert on the 303 and its Location.
    """
    from snippets.main import app

    async def override_get_db_session():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_get_db_session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
