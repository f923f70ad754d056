"""PostgreSQL repository implementations."""

from gossip.persistence.repository.target import PostgresTargetRepository
from gossip.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresTargetRepository",
    "PostgresVoteRepository",
]
