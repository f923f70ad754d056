"""Repository interfaces for Gossip domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from gossip.domain.repository.target import TargetRepository
from gossip.domain.repository.unit_of_work import UnitOfWork
from gossip.domain.repository.vote import VoteRepository

__all__ = [
    "TargetRepository",
    "UnitOfWork",
    "VoteRepository",
]
