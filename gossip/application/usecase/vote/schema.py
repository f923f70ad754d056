"""Shared vote response model."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from gossip.domain.model import VoteSummary
from gossip.domain.value import VotableType


class VoteSummaryResponse(BaseModel):
    """Aggregate vote state returned by every vote operation.

    Serialized with camelCase keys (voteCount, userVote).
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    votable_type: VotableType
    votable_id: int
    vote_count: int
    user_vote: int | None = None

    @classmethod
    def from_summary(cls, summary: VoteSummary) -> "VoteSummaryResponse":
        return cls(
            votable_type=summary.target.kind,
            votable_id=summary.target.id,
            vote_count=summary.vote_count,
            user_vote=int(summary.user_vote) if summary.user_vote is not None else None,
        )
