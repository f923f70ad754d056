"""Unit tests for RemoveVoteUseCase and the vote read use cases."""

import pytest

from gossip.application.usecase.vote import (
    CastVoteRequest,
    CastVoteUseCase,
    GetUserVotesRequest,
    GetUserVotesUseCase,
    GetVoteSummaryRequest,
    GetVoteSummaryUseCase,
    RemoveVoteRequest,
    RemoveVoteUseCase,
)
from gossip.domain.error import NotFoundError
from gossip.domain.value import VotableType, VoteTarget
from gossip.persistence.repository.inmemory import InMemoryStore
from tests.conftest import seed_targets
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _cast(unit_env, votable_type, votable_id, user_id, vote_type):
    cast_vote = await unit_env.get(CastVoteUseCase)
    await cast_vote.execute(
        CastVoteRequest(
            votable_type=votable_type,
            votable_id=votable_id,
            user_id=user_id,
            vote_type=vote_type,
        )
    )


class TestRemoveVoteUseCase:
    """Tests for RemoveVoteUseCase."""

    @pytest.mark.asyncio
    async def test_remove_vote(self, unit_env):
        remove_vote = await unit_env.get(RemoveVoteUseCase)
        store = await unit_env.get(InMemoryStore)
        seed_targets(store, VoteTarget.post(42))
        await _cast(unit_env, VotableType.POST, 42, 7, 1)

        response = await remove_vote.execute(
            RemoveVoteRequest(votable_type=VotableType.POST, votable_id=42, user_id=7)
        )

        assert response.vote_count == 0
        assert response.user_vote is None

    @pytest.mark.asyncio
    async def test_remove_missing_vote_succeeds(self, unit_env):
        remove_vote = await unit_env.get(RemoveVoteUseCase)
        store = await unit_env.get(InMemoryStore)
        seed_targets(store, VoteTarget.comment(9))

        response = await remove_vote.execute(
            RemoveVoteRequest(
                votable_type=VotableType.COMMENT, votable_id=9, user_id=7
            )
        )

        assert response.vote_count == 0

    @pytest.mark.asyncio
    async def test_remove_from_nonexistent_comment(self, unit_env):
        remove_vote = await unit_env.get(RemoveVoteUseCase)

        with pytest.raises(NotFoundError):
            await remove_vote.execute(
                RemoveVoteRequest(
                    votable_type=VotableType.COMMENT, votable_id=404, user_id=7
                )
            )


class TestGetVoteSummaryUseCase:
    """Tests for GetVoteSummaryUseCase."""

    @pytest.mark.asyncio
    async def test_summary_for_caller(self, unit_env):
        get_summary = await unit_env.get(GetVoteSummaryUseCase)
        store = await unit_env.get(InMemoryStore)
        seed_targets(store, VoteTarget.post(42))
        await _cast(unit_env, VotableType.POST, 42, 7, -1)
        await _cast(unit_env, VotableType.POST, 42, 8, -1)

        response = await get_summary.execute(
            GetVoteSummaryRequest(votable_type=VotableType.POST, votable_id=42, user_id=7)
        )

        assert response.vote_count == -2
        assert response.user_vote == -1

    @pytest.mark.asyncio
    async def test_anonymous_summary(self, unit_env):
        get_summary = await unit_env.get(GetVoteSummaryUseCase)
        store = await unit_env.get(InMemoryStore)
        seed_targets(store, VoteTarget.post(42))
        await _cast(unit_env, VotableType.POST, 42, 7, 1)

        response = await get_summary.execute(
            GetVoteSummaryRequest(votable_type=VotableType.POST, votable_id=42)
        )

        assert response.vote_count == 1
        assert response.user_vote is None


class TestGetUserVotesUseCase:
    """Tests for GetUserVotesUseCase."""

    @pytest.mark.asyncio
    async def test_batch_lookup(self, unit_env):
        get_user_votes = await unit_env.get(GetUserVotesUseCase)
        store = await unit_env.get(InMemoryStore)
        seed_targets(
            store, VoteTarget.comment(1), VoteTarget.comment(2), VoteTarget.comment(3)
        )
        await _cast(unit_env, VotableType.COMMENT, 1, 7, 1)
        await _cast(unit_env, VotableType.COMMENT, 3, 7, -1)

        response = await get_user_votes.execute(
            GetUserVotesRequest(
                votable_type=VotableType.COMMENT, votable_ids=[1, 2, 3], user_id=7
            )
        )

        assert response.votes == {1: 1, 3: -1}
        assert response.votable_type == VotableType.COMMENT
