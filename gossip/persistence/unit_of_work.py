"""SQLAlchemy implementation of the unit of work."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import AsyncSession

from gossip.domain.repository import UnitOfWork
from gossip.persistence.errors import as_transient


class SqlAlchemyUnitOfWork(UnitOfWork):
    """Runs a block in one database transaction on the request session.

    When the session already has a transaction open the block runs in a
    savepoint, so a failed attempt can be retried on the same session.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize unit of work with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        try:
            if self.session.in_transaction():
                async with self.session.begin_nested():
                    yield
            else:
                async with self.session.begin():
                    yield
        except Exception as e:
            transient = as_transient(e)
            if transient is not None:
                raise transient from e
            raise
