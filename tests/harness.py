"""Test harness for unit and integration tests.

Unit tests run everything against the in-memory store. Integration tests
run the SQLAlchemy repositories against an in-memory SQLite database, so no
docker services are needed.
"""

from collections.abc import AsyncIterator

import pytest_asyncio
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool

from gossip.persistence.database import create_session_factory
from gossip.persistence.tables import metadata
from gossip.util.di import Component
from tests.di import build_test_container

SQLITE_URL = "sqlite+aiosqlite:///:memory:"


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a test container with specified unmocking
    - Yields request-scoped container for service access

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - everything mocked
        unit_env = create_env_fixture()

        @pytest.mark.asyncio
        async def test_cast_vote(unit_env):
            vote_service = await unit_env.get(VoteService)
            summary = await vote_service.cast_vote(UserId(7), target, 1)
            assert summary.vote_count == 1
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        # Build container with specified unmocking
        container = build_test_container(unmock=unmock or set())

        # Open request-scoped context
        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment


def create_sqlite_fixture():
    """Factory for a fixture yielding a session on a fresh SQLite database.

    Foreign keys are switched on for every connection so that votes on
    missing posts fail the way they do in PostgreSQL.

    Usage:
        sqlite_session = create_sqlite_fixture()

        @pytest.mark.asyncio
        async def test_add(sqlite_session):
            repo = PostgresVoteRepository(sqlite_session)
    """

    @pytest_asyncio.fixture
    async def _sqlite_session() -> AsyncIterator[AsyncSession]:
        engine = create_async_engine(
            SQLITE_URL,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )

        @event.listens_for(engine.sync_engine, "connect")
        def _on_connect(dbapi_connection, connection_record):
            # Transactions are begun by SQLAlchemy, not the driver
            dbapi_connection.isolation_level = None
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

        @event.listens_for(engine.sync_engine, "begin")
        def _on_begin(conn):
            conn.exec_driver_sql("BEGIN")

        async with engine.begin() as conn:
            await conn.run_sync(metadata.create_all)

        session_factory = create_session_factory(engine)
        async with session_factory() as session:
            yield session

        await engine.dispose()

    return _sqlite_session
