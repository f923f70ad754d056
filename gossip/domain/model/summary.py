"""Read-side vote aggregate."""

from typing import Optional

from gossip.domain.model.common import DomainModel
from gossip.domain.value import VoteTarget, VoteType


class VoteSummary(DomainModel):
    """Aggregate vote state of a target as seen by one caller.

    vote_count is the cached signed sum of the target's live votes.
    user_vote is the caller's live vote, or None when they hold none.
    """

    target: VoteTarget
    vote_count: int
    user_vote: Optional[VoteType] = None
