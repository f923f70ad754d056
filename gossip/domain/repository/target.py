"""Votable target repository interface.

Posts and comments are owned by the content subsystem; this repository
only reads and writes their cached vote_count.
"""

from abc import ABC, abstractmethod
from typing import Optional

from gossip.domain.value import VoteTarget


class TargetRepository(ABC):
    """Access to the vote_count counter of posts and comments."""

    @abstractmethod
    async def get_vote_count(self, target: VoteTarget) -> Optional[int]:
        """Read the cached vote count.

        Returns:
            The vote count, or None if the target does not exist
        """
        pass

    @abstractmethod
    async def apply_delta(self, target: VoteTarget, delta: int) -> Optional[int]:
        """Atomically add a signed delta to the vote count.

        The addition is resolved by the store itself, never as a
        read-then-write in application memory.

        Returns:
            The new vote count, or None if the target does not exist
        """
        pass

    @abstractmethod
    async def set_vote_count(self, target: VoteTarget, vote_count: int) -> None:
        """Overwrite the vote count. Only used by reconciliation.

        A missing target is left alone; nothing is written and no error is
        raised.
        """
        pass
