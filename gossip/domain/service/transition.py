"""Vote state machine.

Every (prior state, requested action) pair maps to exactly one transition,
which names the row mutation to perform and the signed delta to apply to the
target's vote_count.
"""

from dataclasses import dataclass
from enum import Enum

from gossip.domain.value import VoteState, VoteType


class VoteAction(str, Enum):
    """Row mutation performed by a transition."""

    INSERT = "insert"
    SWITCH = "switch"
    TOGGLE_OFF = "toggle_off"
    REMOVE = "remove"
    NOOP = "noop"


@dataclass(frozen=True)
class VoteTransition:
    """A single edge of the vote state machine."""

    prior: VoteState
    action: VoteAction
    next_state: VoteState
    delta: int


NO_VOTE = VoteState.NO_VOTE
UP_VOTED = VoteState.UP_VOTED
DOWN_VOTED = VoteState.DOWN_VOTED

CAST_TRANSITIONS: dict[tuple[VoteState, VoteType], VoteTransition] = {
    (NO_VOTE, VoteType.UP): VoteTransition(NO_VOTE, VoteAction.INSERT, UP_VOTED, 1),
    (NO_VOTE, VoteType.DOWN): VoteTransition(
        NO_VOTE, VoteAction.INSERT, DOWN_VOTED, -1
    ),
    (UP_VOTED, VoteType.UP): VoteTransition(
        UP_VOTED, VoteAction.TOGGLE_OFF, NO_VOTE, -1
    ),
    (UP_VOTED, VoteType.DOWN): VoteTransition(
        UP_VOTED, VoteAction.SWITCH, DOWN_VOTED, -2
    ),
    (DOWN_VOTED, VoteType.DOWN): VoteTransition(
        DOWN_VOTED, VoteAction.TOGGLE_OFF, NO_VOTE, 1
    ),
    (DOWN_VOTED, VoteType.UP): VoteTransition(
        DOWN_VOTED, VoteAction.SWITCH, UP_VOTED, 2
    ),
}

REMOVE_TRANSITIONS: dict[VoteState, VoteTransition] = {
    NO_VOTE: VoteTransition(NO_VOTE, VoteAction.NOOP, NO_VOTE, 0),
    UP_VOTED: VoteTransition(UP_VOTED, VoteAction.REMOVE, NO_VOTE, -1),
    DOWN_VOTED: VoteTransition(DOWN_VOTED, VoteAction.REMOVE, NO_VOTE, 1),
}


def plan_cast(prior: VoteState, requested: VoteType) -> VoteTransition:
    """Transition taken when a user casts ``requested`` from ``prior``."""
    return CAST_TRANSITIONS[(prior, requested)]


def plan_remove(prior: VoteState) -> VoteTransition:
    """Transition taken when a user removes their vote from ``prior``."""
    return REMOVE_TRANSITIONS[prior]
