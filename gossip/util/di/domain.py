"""Domain layer DI providers."""

from dishka import Scope, provide

from gossip.domain.repository import TargetRepository, UnitOfWork, VoteRepository
from gossip.domain.service import VoteService
from gossip.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    """

    scope = Scope.REQUEST

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        target_repository: TargetRepository,
        unit_of_work: UnitOfWork,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            target_repository=target_repository,
            unit_of_work=unit_of_work,
        )
