"""Domain value objects for Gossip votes.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum, IntEnum
from typing import Optional

from gossip.domain.value.common import ValueObject


class VoteType(IntEnum):
    """Direction of a vote.

    The integer value is the vote's contribution to a target's vote_count.
    """

    UP = 1
    DOWN = -1


class VotableType(str, Enum):
    """Type of entity that can be voted on."""

    POST = "post"
    COMMENT = "comment"


class VoteState(str, Enum):
    """A user's vote state on a single target.

    NO_VOTE is the absence of a vote row.
    """

    NO_VOTE = "no_vote"
    UP_VOTED = "up_voted"
    DOWN_VOTED = "down_voted"

    @classmethod
    def of(cls, vote_type: Optional[VoteType]) -> "VoteState":
        """State held by a user whose live vote has the given type."""
        if vote_type is None:
            return cls.NO_VOTE
        return cls.UP_VOTED if vote_type is VoteType.UP else cls.DOWN_VOTED

    @property
    def vote_type(self) -> Optional[VoteType]:
        if self is VoteState.UP_VOTED:
            return VoteType.UP
        if self is VoteState.DOWN_VOTED:
            return VoteType.DOWN
        return None


class VoteTarget(ValueObject):
    """Reference to a votable post or comment."""

    kind: VotableType
    id: int

    @classmethod
    def post(cls, post_id: int) -> "VoteTarget":
        return cls(kind=VotableType.POST, id=post_id)

    @classmethod
    def comment(cls, comment_id: int) -> "VoteTarget":
        return cls(kind=VotableType.COMMENT, id=comment_id)

    def __str__(self) -> str:
        return f"{self.kind.value}:{self.id}"
