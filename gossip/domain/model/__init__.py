"""Domain model entities for Gossip votes."""

from gossip.domain.model.summary import VoteSummary
from gossip.domain.model.vote import Vote

__all__ = [
    "Vote",
    "VoteSummary",
]
