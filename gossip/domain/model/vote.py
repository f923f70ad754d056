"""Vote entity.

Votes represent one user's endorsement or rejection of a post or comment.
Each user holds at most one live vote per item.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from gossip.domain.model.common import DomainModel
from gossip.domain.value import (
    CommentId,
    PostId,
    UserId,
    VotableType,
    VoteId,
    VoteTarget,
    VoteType,
)


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - One vote per user per item (enforced by database unique constraints)
    - Direction is +1 (up) or -1 (down)
    - Exactly one of post_id / comment_id is set
    """

    id: VoteId
    user_id: UserId
    post_id: Optional[PostId] = None
    comment_id: Optional[CommentId] = None
    vote_type: VoteType
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def validate_single_target(self) -> "Vote":
        """Validate that the vote references exactly one target."""
        if (self.post_id is None) == (self.comment_id is None):
            raise ValueError("Vote must reference exactly one of post or comment")
        return self

    @property
    def votable_type(self) -> VotableType:
        return VotableType.POST if self.post_id is not None else VotableType.COMMENT

    @property
    def target(self) -> VoteTarget:
        target_id = self.post_id if self.post_id is not None else self.comment_id
        return VoteTarget(kind=self.votable_type, id=target_id)

    @classmethod
    def for_target(
        cls,
        vote_id: VoteId,
        user_id: UserId,
        target: VoteTarget,
        vote_type: VoteType,
        now: datetime,
    ) -> "Vote":
        """Build a new vote on a target."""
        return cls(
            id=vote_id,
            user_id=user_id,
            post_id=PostId(target.id) if target.kind == VotableType.POST else None,
            comment_id=(
                CommentId(target.id) if target.kind == VotableType.COMMENT else None
            ),
            vote_type=vote_type,
            created_at=now,
            updated_at=now,
        )
