"""In-memory repository implementations for testing."""

from .store import InMemoryStore, InMemoryUnitOfWork
from .target import InMemoryTargetRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryStore",
    "InMemoryTargetRepository",
    "InMemoryUnitOfWork",
    "InMemoryVoteRepository",
]
