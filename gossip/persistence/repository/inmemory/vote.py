"""In-memory vote repository for testing."""

from datetime import datetime
from typing import Optional, Sequence

from gossip.domain.error import ConflictError, NotFoundError
from gossip.domain.model.vote import Vote
from gossip.domain.repository.vote import VoteRepository
from gossip.domain.value import UserId, VotableType, VoteId, VoteTarget, VoteType

from .store import InMemoryStore


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    def _matching(self, user_id: UserId, target: VoteTarget) -> Optional[Vote]:
        for vote in self.store.votes.values():
            if vote.user_id == user_id and vote.target == target:
                return vote
        return None

    async def find_for_update(
        self, user_id: UserId, target: VoteTarget
    ) -> Optional[Vote]:
        """Find a vote by user and target."""
        return self._matching(user_id, target)

    async def find_by_user_and_targets(
        self,
        user_id: UserId,
        kind: VotableType,
        target_ids: Sequence[int],
    ) -> list[Vote]:
        """Find a user's votes on multiple items (batch query)."""
        if not target_ids:
            return []

        wanted = set(target_ids)
        return [
            v
            for v in self.store.votes.values()
            if v.user_id == user_id
            and v.votable_type == kind
            and v.target.id in wanted
        ]

    async def add(
        self,
        user_id: UserId,
        target: VoteTarget,
        vote_type: VoteType,
        now: datetime,
    ) -> Vote:
        """Save a vote.

        Raises:
            NotFoundError: If the target does not exist (foreign key)
            ConflictError: If vote already exists (duplicate)
        """
        if (target.kind, target.id) not in self.store.vote_counts:
            raise NotFoundError(target.kind.value.capitalize(), str(target.id))
        if self._matching(user_id, target):
            raise ConflictError(f"User {user_id} already voted on {target}")

        vote = Vote.for_target(
            vote_id=VoteId(self.store.next_vote_id),
            user_id=user_id,
            target=target,
            vote_type=vote_type,
            now=now,
        )
        self.store.next_vote_id += 1
        self.store.votes[vote.id] = vote
        return vote

    async def change_type(
        self, vote_id: VoteId, vote_type: VoteType, now: datetime
    ) -> Vote:
        """Flip a vote's direction (votes are immutable, so replace it)."""
        vote = self.store.votes.get(vote_id)
        if vote is None:
            raise NotFoundError("Vote", str(vote_id))
        updated = vote.model_copy(update={"vote_type": vote_type, "updated_at": now})
        self.store.votes[vote_id] = updated
        return updated

    async def delete(self, vote_id: VoteId) -> None:
        """Delete a vote by ID."""
        self.store.votes.pop(vote_id, None)

    async def sum_by_target(self, target: VoteTarget) -> int:
        """Signed sum of the target's live votes."""
        return sum(
            int(v.vote_type) for v in self.store.votes.values() if v.target == target
        )
