"""Application layer DI providers."""

from dishka import Scope, provide

from gossip.application.usecase.vote import (
    CastVoteUseCase,
    GetUserVotesUseCase,
    GetVoteSummaryUseCase,
    RemoveVoteUseCase,
)
from gossip.config import VotingSettings
from gossip.domain.service import VoteService
from gossip.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(
        self, vote_service: VoteService, policy: VotingSettings
    ) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(vote_service=vote_service, policy=policy)

    @provide(scope=Scope.REQUEST)
    def get_remove_vote_use_case(
        self, vote_service: VoteService, policy: VotingSettings
    ) -> RemoveVoteUseCase:
        """Provide remove vote use case."""
        return RemoveVoteUseCase(vote_service=vote_service, policy=policy)

    @provide(scope=Scope.REQUEST)
    def get_vote_summary_use_case(
        self, vote_service: VoteService, policy: VotingSettings
    ) -> GetVoteSummaryUseCase:
        """Provide get vote summary use case."""
        return GetVoteSummaryUseCase(vote_service=vote_service, policy=policy)

    @provide(scope=Scope.REQUEST)
    def get_user_votes_use_case(
        self, vote_service: VoteService, policy: VotingSettings
    ) -> GetUserVotesUseCase:
        """Provide get user votes use case."""
        return GetUserVotesUseCase(vote_service=vote_service, policy=policy)
