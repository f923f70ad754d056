"""Vote domain service."""

from datetime import datetime
from typing import Optional, Sequence

import logfire

from gossip.domain.error import NotFoundError, ValidationError
from gossip.domain.model import Vote, VoteSummary
from gossip.domain.repository import TargetRepository, UnitOfWork, VoteRepository
from gossip.domain.value import (
    MAX_ID,
    UserId,
    VotableType,
    VoteState,
    VoteTarget,
    VoteType,
)

from .base import Service
from .transition import VoteAction, VoteTransition, plan_cast, plan_remove


class VoteService(Service):
    """Domain service for vote operations.

    Every mutating call runs one unit-of-work transaction that contains both
    the vote row mutation and the signed vote_count delta, so the cached
    count always equals the sum of live votes.
    """

    def __init__(
        self,
        vote_repository: VoteRepository,
        target_repository: TargetRepository,
        unit_of_work: UnitOfWork,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            target_repository: Post/comment vote_count repository
            unit_of_work: Transaction boundary shared by both repositories
        """
        self.vote_repository = vote_repository
        self.target_repository = target_repository
        self.unit_of_work = unit_of_work

    async def cast_vote(
        self, user_id: UserId, target: VoteTarget, vote_type: int
    ) -> VoteSummary:
        """Cast a vote on a post or comment.

        Casting with no prior vote inserts it, casting the same direction
        again toggles the vote off, and casting the opposite direction
        switches it.

        Args:
            user_id: Caller's user ID
            target: Voted post or comment
            vote_type: +1 or -1

        Returns:
            The target's vote count and the caller's resulting vote

        Raises:
            ValidationError: If any input is malformed
            NotFoundError: If the target does not exist
            ConflictError: If a concurrent duplicate insert won the race
        """
        requested = _validate_vote_type(vote_type)
        _validate_ids(user_id, target)

        with logfire.span(
            "cast_vote",
            user_id=user_id,
            target=str(target),
            vote_type=int(requested),
        ):
            async with self.unit_of_work.transaction():
                existing = await self.vote_repository.find_for_update(user_id, target)
                transition = plan_cast(_state_of(existing), requested)
                vote_count = await self._apply_delta(target, transition.delta)
                await self._mutate(user_id, target, existing, transition, requested)

            logfire.info(
                "Vote cast",
                user_id=user_id,
                target=str(target),
                action=transition.action.value,
                delta=transition.delta,
                vote_count=vote_count,
            )
            return VoteSummary(
                target=target,
                vote_count=vote_count,
                user_vote=transition.next_state.vote_type,
            )

    async def remove_vote(self, user_id: UserId, target: VoteTarget) -> VoteSummary:
        """Remove a user's vote from a post or comment.

        Removing a vote that does not exist is a successful no-op.

        Args:
            user_id: Caller's user ID
            target: Voted post or comment

        Returns:
            The target's vote count, with no caller vote

        Raises:
            ValidationError: If any input is malformed
            NotFoundError: If the target does not exist
        """
        _validate_ids(user_id, target)

        with logfire.span("remove_vote", user_id=user_id, target=str(target)):
            async with self.unit_of_work.transaction():
                existing = await self.vote_repository.find_for_update(user_id, target)
                transition = plan_remove(_state_of(existing))
                vote_count = await self._apply_delta(target, transition.delta)
                await self._mutate(user_id, target, existing, transition, None)

            if transition.action is VoteAction.NOOP:
                logfire.info(
                    "No vote to remove", user_id=user_id, target=str(target)
                )
            else:
                logfire.info(
                    "Vote removed",
                    user_id=user_id,
                    target=str(target),
                    delta=transition.delta,
                    vote_count=vote_count,
                )
            return VoteSummary(target=target, vote_count=vote_count, user_vote=None)

    async def get_summary(
        self, user_id: Optional[UserId], target: VoteTarget
    ) -> VoteSummary:
        """Read a target's vote count and, for a known caller, their vote.

        Args:
            user_id: Caller's user ID, or None for anonymous readers
            target: Post or comment

        Raises:
            ValidationError: If any input is malformed
            NotFoundError: If the target does not exist
        """
        _validate_target(target)
        if user_id is not None:
            _validate_user_id(user_id)

        async with self.unit_of_work.transaction():
            vote_count = await self.target_repository.get_vote_count(target)
            if vote_count is None:
                raise _target_not_found(target)

            user_vote = None
            if user_id is not None:
                votes = await self.vote_repository.find_by_user_and_targets(
                    user_id, target.kind, [target.id]
                )
                user_vote = votes[0].vote_type if votes else None

        return VoteSummary(target=target, vote_count=vote_count, user_vote=user_vote)

    async def get_user_votes(
        self, user_id: UserId, kind: VotableType, target_ids: Sequence[int]
    ) -> dict[int, VoteType]:
        """Look up which of the given items a user has voted on.

        Args:
            user_id: User ID
            kind: Type of items (post or comment)
            target_ids: Item IDs to check

        Returns:
            Mapping of item ID to the user's vote, for voted items only
        """
        _validate_user_id(user_id)
        for target_id in target_ids:
            _validate_positive(VoteTarget(kind=kind, id=target_id))
        # IDs past the column range cannot have votes
        target_ids = [target_id for target_id in target_ids if target_id <= MAX_ID]
        if not target_ids:
            return {}

        # Batch query to fetch all votes at once (avoid N+1)
        async with self.unit_of_work.transaction():
            votes = await self.vote_repository.find_by_user_and_targets(
                user_id=user_id, kind=kind, target_ids=target_ids
            )
        return {vote.target.id: vote.vote_type for vote in votes}

    async def reconcile(self, target: VoteTarget) -> VoteSummary:
        """Recompute a target's vote count from its live votes.

        Repair tool for counters that drifted through out-of-band writes.
        The normal write path never needs it.

        Raises:
            ValidationError: If the target reference is malformed
            NotFoundError: If the target does not exist
        """
        _validate_target(target)

        with logfire.span("reconcile_vote_count", target=str(target)):
            async with self.unit_of_work.transaction():
                cached = await self.target_repository.get_vote_count(target)
                if cached is None:
                    raise _target_not_found(target)

                live = await self.vote_repository.sum_by_target(target)
                if live != cached:
                    await self.target_repository.set_vote_count(target, live)
                    logfire.warn(
                        "Vote count drift corrected",
                        target=str(target),
                        cached=cached,
                        live=live,
                    )

            return VoteSummary(target=target, vote_count=live)

    async def _apply_delta(self, target: VoteTarget, delta: int) -> int:
        if delta == 0:
            vote_count = await self.target_repository.get_vote_count(target)
        else:
            vote_count = await self.target_repository.apply_delta(target, delta)

        if vote_count is None:
            logfire.warn("Vote on non-existent target", target=str(target))
            raise _target_not_found(target)
        return vote_count

    async def _mutate(
        self,
        user_id: UserId,
        target: VoteTarget,
        existing: Optional[Vote],
        transition: VoteTransition,
        vote_type: Optional[VoteType],
    ) -> None:
        now = datetime.now()
        action = transition.action

        if action is VoteAction.INSERT:
            await self.vote_repository.add(user_id, target, vote_type, now)
        elif action is VoteAction.SWITCH:
            await self.vote_repository.change_type(existing.id, vote_type, now)
        elif action in (VoteAction.TOGGLE_OFF, VoteAction.REMOVE):
            await self.vote_repository.delete(existing.id)


def _state_of(vote: Optional[Vote]) -> VoteState:
    return VoteState.of(vote.vote_type if vote else None)


def _validate_vote_type(vote_type: int) -> VoteType:
    if isinstance(vote_type, bool) or not isinstance(vote_type, int):
        raise ValidationError(f"invalid vote type: {vote_type!r}")
    try:
        return VoteType(vote_type)
    except ValueError:
        raise ValidationError(f"invalid vote type: {vote_type}")


def _validate_user_id(user_id: int) -> None:
    if (
        isinstance(user_id, bool)
        or not isinstance(user_id, int)
        or not 0 < user_id <= MAX_ID
    ):
        raise ValidationError(f"invalid user ID: {user_id}")


def _validate_positive(target: VoteTarget) -> None:
    if isinstance(target.id, bool) or target.id <= 0:
        raise ValidationError(f"invalid {target.kind.value} ID: {target.id}")


def _validate_target(target: VoteTarget) -> None:
    _validate_positive(target)
    # No post or comment is stored past the column range
    if target.id > MAX_ID:
        raise _target_not_found(target)


def _validate_ids(user_id: int, target: VoteTarget) -> None:
    _validate_user_id(user_id)
    _validate_target(target)


def _target_not_found(target: VoteTarget) -> NotFoundError:
    return NotFoundError(target.kind.value.capitalize(), str(target.id))
