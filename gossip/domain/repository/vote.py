"""Vote repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional, Sequence

from gossip.domain.model.vote import Vote
from gossip.domain.value import UserId, VotableType, VoteId, VoteTarget, VoteType


class VoteRepository(ABC):
    """Repository for Vote entity.

    Defines the contract for vote persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_for_update(
        self, user_id: UserId, target: VoteTarget
    ) -> Optional[Vote]:
        """Find a user's vote on a target and lock it for the transaction.

        Args:
            user_id: The user's ID
            target: The voted post or comment

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user_and_targets(
        self,
        user_id: UserId,
        kind: VotableType,
        target_ids: Sequence[int],
    ) -> List[Vote]:
        """Find a user's votes on multiple items (batch query).

        Args:
            user_id: The user's ID
            kind: Type of items (post or comment)
            target_ids: IDs of the items to check

        Returns:
            List of votes by the user on the specified items
        """
        pass

    @abstractmethod
    async def add(
        self,
        user_id: UserId,
        target: VoteTarget,
        vote_type: VoteType,
        now: datetime,
    ) -> Vote:
        """Insert a new vote.

        Raises:
            ConflictError: If a vote already exists for this user and target
            NotFoundError: If the target does not exist
        """
        pass

    @abstractmethod
    async def change_type(
        self, vote_id: VoteId, vote_type: VoteType, now: datetime
    ) -> Vote:
        """Flip the direction of an existing vote."""
        pass

    @abstractmethod
    async def delete(self, vote_id: VoteId) -> None:
        """Delete a vote."""
        pass

    @abstractmethod
    async def sum_by_target(self, target: VoteTarget) -> int:
        """Signed sum of vote_type over the target's live votes."""
        pass
