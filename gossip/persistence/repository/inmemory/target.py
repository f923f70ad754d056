"""In-memory votable target repository for testing."""

from typing import Optional

from gossip.domain.repository.target import TargetRepository
from gossip.domain.value import VoteTarget

from .store import InMemoryStore


class InMemoryTargetRepository(TargetRepository):
    """In-memory implementation of TargetRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def get_vote_count(self, target: VoteTarget) -> Optional[int]:
        """Read the cached vote count."""
        return self.store.vote_counts.get((target.kind, target.id))

    async def apply_delta(self, target: VoteTarget, delta: int) -> Optional[int]:
        """Add delta to the vote count.

        No await between read and write, so this is atomic on the event loop.
        """
        key = (target.kind, target.id)
        if key not in self.store.vote_counts:
            return None
        self.store.vote_counts[key] += delta
        return self.store.vote_counts[key]

    async def set_vote_count(self, target: VoteTarget, vote_count: int) -> None:
        """Overwrite the vote count; a missing target is ignored."""
        key = (target.kind, target.id)
        if key in self.store.vote_counts:
            self.store.vote_counts[key] = vote_count
