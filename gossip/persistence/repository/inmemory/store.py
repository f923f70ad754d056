"""Shared in-memory store backing the in-memory repositories."""

import asyncio
import copy
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass, field

from gossip.domain.model.vote import Vote
from gossip.domain.repository.unit_of_work import UnitOfWork
from gossip.domain.value import VotableType, VoteId


@dataclass
class InMemoryStore:
    """Tables of the in-memory database.

    vote_counts maps (kind, target id) to the cached counter; a key's
    presence means the post or comment exists.
    """

    votes: dict[VoteId, Vote] = field(default_factory=dict)
    vote_counts: dict[tuple[VotableType, int], int] = field(default_factory=dict)
    next_vote_id: int = 1
    lock: asyncio.Lock = field(default_factory=asyncio.Lock)

    def add_post(self, post_id: int, vote_count: int = 0) -> None:
        """Create a post, as the content subsystem would."""
        self.vote_counts[(VotableType.POST, post_id)] = vote_count

    def add_comment(self, comment_id: int, vote_count: int = 0) -> None:
        """Create a comment, as the content subsystem would."""
        self.vote_counts[(VotableType.COMMENT, comment_id)] = vote_count

    def snapshot(self) -> tuple[dict, dict, int]:
        return dict(self.votes), copy.copy(self.vote_counts), self.next_vote_id

    def restore(self, snapshot: tuple[dict, dict, int]) -> None:
        self.votes, self.vote_counts, self.next_vote_id = snapshot


class InMemoryUnitOfWork(UnitOfWork):
    """Serializes transactions on the store and rolls back on failure."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        async with self.store.lock:
            snapshot = self.store.snapshot()
            try:
                yield
            except BaseException:
                self.store.restore(snapshot)
                raise
