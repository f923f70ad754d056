"""PostgreSQL implementation of the votable target repository."""

from typing import Optional

from sqlalchemy import Table, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from gossip.domain.repository import TargetRepository
from gossip.domain.value import VotableType, VoteTarget
from gossip.persistence.tables import comments_table, posts_table


def _table(kind: VotableType) -> Table:
    return posts_table if kind == VotableType.POST else comments_table


class PostgresTargetRepository(TargetRepository):
    """Reads and atomically adjusts posts.vote_count / comments.vote_count."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def get_vote_count(self, target: VoteTarget) -> Optional[int]:
        """Read the cached vote count."""
        table = _table(target.kind)
        stmt = select(table.c.vote_count).where(table.c.id == target.id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def apply_delta(self, target: VoteTarget, delta: int) -> Optional[int]:
        """Atomically add delta to the vote count (SQL-level increment)."""
        table = _table(target.kind)
        stmt = (
            update(table)
            .where(table.c.id == target.id)
            .values(vote_count=table.c.vote_count + delta)
            .returning(table.c.vote_count)
        )
        result = await self.session.execute(stmt)
        vote_count = result.scalar_one_or_none()
        await self.session.flush()
        return vote_count

    async def set_vote_count(self, target: VoteTarget, vote_count: int) -> None:
        """Overwrite the vote count; a missing target is ignored."""
        table = _table(target.kind)
        stmt = (
            update(table)
            .where(table.c.id == target.id)
            .values(vote_count=vote_count)
        )
        await self.session.execute(stmt)
        await self.session.flush()
