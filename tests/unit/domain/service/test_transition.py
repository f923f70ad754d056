"""Unit tests for the vote state machine."""

import pytest

from gossip.domain.service import (
    CAST_TRANSITIONS,
    REMOVE_TRANSITIONS,
    VoteAction,
    plan_cast,
    plan_remove,
)
from gossip.domain.value import VoteState, VoteType

UP = VoteType.UP
DOWN = VoteType.DOWN


class TestCastTransitions:
    """Tests for the six cast edges."""

    @pytest.mark.parametrize(
        ("prior", "requested", "action", "next_state", "delta"),
        [
            (VoteState.NO_VOTE, UP, VoteAction.INSERT, VoteState.UP_VOTED, 1),
            (VoteState.NO_VOTE, DOWN, VoteAction.INSERT, VoteState.DOWN_VOTED, -1),
            (VoteState.UP_VOTED, UP, VoteAction.TOGGLE_OFF, VoteState.NO_VOTE, -1),
            (VoteState.UP_VOTED, DOWN, VoteAction.SWITCH, VoteState.DOWN_VOTED, -2),
            (VoteState.DOWN_VOTED, DOWN, VoteAction.TOGGLE_OFF, VoteState.NO_VOTE, 1),
            (VoteState.DOWN_VOTED, UP, VoteAction.SWITCH, VoteState.UP_VOTED, 2),
        ],
    )
    def test_cast_edge(self, prior, requested, action, next_state, delta):
        """Each (state, vote type) pair has exactly one outcome."""
        transition = plan_cast(prior, requested)

        assert transition.prior == prior
        assert transition.action == action
        assert transition.next_state == next_state
        assert transition.delta == delta

    def test_table_covers_every_state_and_direction(self):
        """No cast input is left unhandled."""
        expected = {(state, vote_type) for state in VoteState for vote_type in VoteType}
        assert set(CAST_TRANSITIONS) == expected

    @pytest.mark.parametrize("prior", list(VoteState))
    @pytest.mark.parametrize("requested", list(VoteType))
    def test_delta_matches_change_in_contribution(self, prior, requested):
        """Delta equals the user's new contribution minus the old one."""
        transition = plan_cast(prior, requested)

        before = int(prior.vote_type or 0)
        after = int(transition.next_state.vote_type or 0)
        assert transition.delta == after - before


class TestRemoveTransitions:
    """Tests for the remove edges."""

    @pytest.mark.parametrize(
        ("prior", "action", "delta"),
        [
            (VoteState.NO_VOTE, VoteAction.NOOP, 0),
            (VoteState.UP_VOTED, VoteAction.REMOVE, -1),
            (VoteState.DOWN_VOTED, VoteAction.REMOVE, 1),
        ],
    )
    def test_remove_edge(self, prior, action, delta):
        """Removing always ends in NO_VOTE."""
        transition = plan_remove(prior)

        assert transition.action == action
        assert transition.next_state == VoteState.NO_VOTE
        assert transition.delta == delta

    def test_table_covers_every_state(self):
        assert set(REMOVE_TRANSITIONS) == set(VoteState)


class TestVoteState:
    """Tests for mapping between vote types and states."""

    def test_state_of_vote_type(self):
        assert VoteState.of(None) == VoteState.NO_VOTE
        assert VoteState.of(UP) == VoteState.UP_VOTED
        assert VoteState.of(DOWN) == VoteState.DOWN_VOTED

    def test_state_round_trips_to_vote_type(self):
        for state in VoteState:
            assert VoteState.of(state.vote_type) == state
