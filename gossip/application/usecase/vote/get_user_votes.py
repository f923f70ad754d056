"""Get user votes use case."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from gossip.config import VotingSettings
from gossip.domain.service import VoteService
from gossip.domain.value import UserId, VotableType

from .retry import run_with_retries


class GetUserVotesRequest(BaseModel):
    """Get user votes request."""

    votable_type: VotableType
    votable_ids: list[int]
    user_id: int


class GetUserVotesResponse(BaseModel):
    """The caller's votes on the requested items; unvoted items are omitted."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    votable_type: VotableType
    votes: dict[int, int]


class GetUserVotesUseCase:
    """Use case for looking up a user's votes on a page of items."""

    def __init__(self, vote_service: VoteService, policy: VotingSettings) -> None:
        self.vote_service = vote_service
        self.policy = policy

    async def execute(self, request: GetUserVotesRequest) -> GetUserVotesResponse:
        votes = await run_with_retries(
            lambda: self.vote_service.get_user_votes(
                UserId(request.user_id), request.votable_type, request.votable_ids
            ),
            self.policy,
            name="get_user_votes",
        )
        return GetUserVotesResponse(
            votable_type=request.votable_type,
            votes={target_id: int(vote_type) for target_id, vote_type in votes.items()},
        )
