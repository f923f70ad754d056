"""Get vote summary use case."""

from pydantic import BaseModel

from gossip.config import VotingSettings
from gossip.domain.service import VoteService
from gossip.domain.value import UserId, VotableType, VoteTarget

from .retry import run_with_retries
from .schema import VoteSummaryResponse


class GetVoteSummaryRequest(BaseModel):
    """Get vote summary request."""

    votable_type: VotableType
    votable_id: int
    user_id: int | None = None  # Anonymous readers see no user vote


class GetVoteSummaryUseCase:
    """Use case for reading an item's vote count and the caller's vote."""

    def __init__(self, vote_service: VoteService, policy: VotingSettings) -> None:
        self.vote_service = vote_service
        self.policy = policy

    async def execute(self, request: GetVoteSummaryRequest) -> VoteSummaryResponse:
        user_id = UserId(request.user_id) if request.user_id is not None else None
        target = VoteTarget(kind=request.votable_type, id=request.votable_id)

        summary = await run_with_retries(
            lambda: self.vote_service.get_summary(user_id, target),
            self.policy,
            name="get_vote_summary",
        )
        return VoteSummaryResponse.from_summary(summary)
