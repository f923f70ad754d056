"""Cast vote use case."""

from pydantic import BaseModel, StrictInt

from gossip.config import VotingSettings
from gossip.domain.service import VoteService
from gossip.domain.value import UserId, VotableType, VoteTarget

from .retry import run_with_retries
from .schema import VoteSummaryResponse


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    votable_type: VotableType
    votable_id: int
    user_id: int  # User ID from the authenticated caller
    vote_type: StrictInt  # 1 for upvote, -1 for downvote


class CastVoteUseCase:
    """Use case for up- or down-voting a post or comment."""

    def __init__(self, vote_service: VoteService, policy: VotingSettings) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
            policy: Retry policy for conflicts and transient failures
        """
        self.vote_service = vote_service
        self.policy = policy

    async def execute(self, request: CastVoteRequest) -> VoteSummaryResponse:
        """Execute cast vote flow.

        Args:
            request: Cast vote request

        Returns:
            Target's vote count and the caller's resulting vote

        Raises:
            ValidationError: If the vote type or IDs are invalid
            NotFoundError: If the item does not exist
        """
        user_id = UserId(request.user_id)
        target = VoteTarget(kind=request.votable_type, id=request.votable_id)

        summary = await run_with_retries(
            lambda: self.vote_service.cast_vote(user_id, target, request.vote_type),
            self.policy,
            name="cast_vote",
        )
        return VoteSummaryResponse.from_summary(summary)
