"""Remove vote use case."""

from pydantic import BaseModel

from gossip.config import VotingSettings
from gossip.domain.service import VoteService
from gossip.domain.value import UserId, VotableType, VoteTarget

from .retry import run_with_retries
from .schema import VoteSummaryResponse


class RemoveVoteRequest(BaseModel):
    """Remove vote request."""

    votable_type: VotableType
    votable_id: int
    user_id: int  # User ID from the authenticated caller


class RemoveVoteUseCase:
    """Use case for removing a vote from a post or comment."""

    def __init__(self, vote_service: VoteService, policy: VotingSettings) -> None:
        """Initialize remove vote use case.

        Args:
            vote_service: Vote domain service
            policy: Retry policy for conflicts and transient failures
        """
        self.vote_service = vote_service
        self.policy = policy

    async def execute(self, request: RemoveVoteRequest) -> VoteSummaryResponse:
        """Execute remove vote flow.

        Removing a vote that does not exist succeeds without changes.

        Raises:
            ValidationError: If the IDs are invalid
            NotFoundError: If the item does not exist
        """
        user_id = UserId(request.user_id)
        target = VoteTarget(kind=request.votable_type, id=request.votable_id)

        summary = await run_with_retries(
            lambda: self.vote_service.remove_vote(user_id, target),
            self.policy,
            name="remove_vote",
        )
        return VoteSummaryResponse.from_summary(summary)
