"""PostgreSQL implementation of Vote repository."""

from datetime import datetime
from typing import List, Optional, Sequence

from sqlalchemy import and_, delete, func, insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from gossip.domain.error import ConflictError, NotFoundError
from gossip.domain.model import Vote
from gossip.domain.repository import VoteRepository
from gossip.domain.value import UserId, VotableType, VoteId, VoteTarget, VoteType
from gossip.persistence.errors import is_foreign_key_violation
from gossip.persistence.mappers import row_to_vote
from gossip.persistence.tables import votes_table


def _target_column(kind: VotableType):
    return votes_table.c.post_id if kind == VotableType.POST else votes_table.c.comment_id


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_for_update(
        self, user_id: UserId, target: VoteTarget
    ) -> Optional[Vote]:
        """Find a user's vote on a target and lock the row."""
        stmt = (
            select(votes_table)
            .where(
                and_(
                    votes_table.c.user_id == user_id,
                    _target_column(target.kind) == target.id,
                )
            )
            .with_for_update()
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def find_by_user_and_targets(
        self,
        user_id: UserId,
        kind: VotableType,
        target_ids: Sequence[int],
    ) -> List[Vote]:
        """Find a user's votes on multiple items (batch query)."""
        if not target_ids:
            return []

        stmt = select(votes_table).where(
            and_(
                votes_table.c.user_id == user_id,
                _target_column(kind).in_(target_ids),
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def add(
        self,
        user_id: UserId,
        target: VoteTarget,
        vote_type: VoteType,
        now: datetime,
    ) -> Vote:
        """Insert a new vote."""
        stmt = (
            insert(votes_table)
            .values(
                user_id=user_id,
                post_id=target.id if target.kind == VotableType.POST else None,
                comment_id=target.id if target.kind == VotableType.COMMENT else None,
                vote_type=int(vote_type),
                created_at=now,
                updated_at=now,
            )
            .returning(*votes_table.c)
        )
        try:
            result = await self.session.execute(stmt)
        except IntegrityError as e:
            if is_foreign_key_violation(e):
                raise NotFoundError(
                    target.kind.value.capitalize(), str(target.id)
                ) from e
            raise ConflictError(
                f"User {user_id} already voted on {target}"
            ) from e

        row = result.fetchone()
        await self.session.flush()
        return row_to_vote(row._asdict())

    async def change_type(
        self, vote_id: VoteId, vote_type: VoteType, now: datetime
    ) -> Vote:
        """Flip the direction of an existing vote."""
        stmt = (
            update(votes_table)
            .where(votes_table.c.id == vote_id)
            .values(vote_type=int(vote_type), updated_at=now)
            .returning(*votes_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        if row is None:
            raise NotFoundError("Vote", str(vote_id))
        return row_to_vote(row._asdict())

    async def delete(self, vote_id: VoteId) -> None:
        """Delete a vote."""
        stmt = delete(votes_table).where(votes_table.c.id == vote_id)
        await self.session.execute(stmt)
        await self.session.flush()

    async def sum_by_target(self, target: VoteTarget) -> int:
        """Signed sum of the target's live votes."""
        stmt = select(func.coalesce(func.sum(votes_table.c.vote_type), 0)).where(
            _target_column(target.kind) == target.id
        )
        result = await self.session.execute(stmt)
        return int(result.scalar_one())
