"""Domain value objects for Gossip votes."""

from gossip.domain.value.identifiers import (
    MAX_ID,
    CommentId,
    PostId,
    UserId,
    VoteId,
)
from gossip.domain.value.types import VotableType, VoteState, VoteTarget, VoteType

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    "VoteId",
    "MAX_ID",
    # Types
    "VoteType",
    "VotableType",
    "VoteState",
    "VoteTarget",
]
