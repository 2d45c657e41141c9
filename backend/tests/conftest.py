"""
Banknote Verifier Backend — Test Configuration (conftest.py)
=============================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── mock_db_session:   AsyncMock session (no database at all)
    ├── db_engine:         Fresh in-memory SQLite engine with all tables
    ├── session_factory:   Session factory bound to db_engine (empty tables)
    ├── seeded_factory:    Same factory after the reference data is seeded
    ├── db_session:        One session from seeded_factory
    ├── test_client:       HTTPX AsyncClient against the app, real (SQLite) sessions
    ├── mock_client:       HTTPX AsyncClient against the app, mock_db_session injected
    └── failing_commit_client: Like test_client, but every commit raises
"""

import os

# Override settings BEFORE any app imports so the Settings singleton and the
# module-level engine never point at a real PostgreSQL instance
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["SEED_ON_STARTUP"] = "false"

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import func, select
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.database import Base, get_db_session
from app.models import VerificationLog
from app.services.seed_service import seed_reference_data


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        mock_db_session.execute.return_value.scalar_one_or_none.return_value = country
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest_asyncio.fixture
async def db_engine():
    """In-memory SQLite shared across sessions through a single pooled connection."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(db_engine):
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def seeded_factory(session_factory):
    async with session_factory() as session:
        await seed_reference_data(session)
        await session.commit()
    return session_factory


@pytest_asyncio.fixture
async def db_session(seeded_factory):
    async with seeded_factory() as session:
        yield session


@pytest.fixture
def count_logs(seeded_factory):
    """Returns an async callable giving the committed number of log rows."""

    async def _count() -> int:
        async with seeded_factory() as session:
            result = await session.execute(select(func.count(VerificationLog.id)))
            return result.scalar_one()

    return _count


def _build_app(override):
    from app.main import create_app

    app = create_app()
    app.dependency_overrides[get_db_session] = override
    return app


@pytest_asyncio.fixture
async def test_client(seeded_factory):
    """
    HTTP client whose requests use real sessions on the seeded SQLite engine.

    The override mirrors get_db_session: commit on success, rollback on error.
    """

    async def override():
        async with seeded_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    transport = ASGITransport(app=_build_app(override))
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def mock_client(mock_db_session):
    """HTTP client whose requests receive `mock_db_session`; app errors become responses."""

    async def override():
        yield mock_db_session

    transport = ASGITransport(app=_build_app(override), raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def failing_commit_client(seeded_factory):
    """
    HTTP client whose real sessions can query and flush but fail on commit.

    Models the connection dropping between the log INSERT and COMMIT.
    """

    async def override():
        async with seeded_factory() as session:
            with patch.object(
                session,
                "commit",
                AsyncMock(side_effect=OperationalError("COMMIT", {}, Exception("connection reset"))),
            ):
                try:
                    yield session
                except Exception:
                    await session.rollback()
                    raise

    transport = ASGITransport(app=_build_app(override), raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
