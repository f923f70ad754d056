"""Tests for vote API routes."""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from gossip.domain.error import TransientStoreError
from gossip.domain.value import VoteTarget
from gossip.interface.api.app import create_app
from gossip.persistence.repository.inmemory import (
    InMemoryStore,
    InMemoryTargetRepository,
)
from tests.conftest import seed_targets
from tests.di import build_test_container


def caller(user_id: int) -> dict[str, str]:
    return {"X-User-Id": str(user_id)}


@pytest_asyncio.fixture
async def container():
    container = build_test_container()
    store = await container.get(InMemoryStore)
    seed_targets(store, VoteTarget.post(42), VoteTarget.comment(9))
    yield container
    await container.close()


@pytest_asyncio.fixture
async def client(container):
    app = create_app(container)
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as client:
        yield client


class TestPostVoteRoutes:
    """Tests for /posts/{post_id}/vote."""

    @pytest.mark.asyncio
    async def test_upvote_post(self, client):
        response = await client.post(
            "/posts/42/vote", json={"voteType": 1}, headers=caller(7)
        )

        assert response.status_code == 200
        body = response.json()
        assert body["voteCount"] == 1
        assert body["userVote"] == 1
        assert body["votableType"] == "post"
        assert body["votableId"] == 42

    @pytest.mark.asyncio
    async def test_same_vote_twice_toggles_off(self, client):
        await client.post("/posts/42/vote", json={"voteType": -1}, headers=caller(7))

        response = await client.post(
            "/posts/42/vote", json={"voteType": -1}, headers=caller(7)
        )

        assert response.status_code == 200
        assert response.json()["voteCount"] == 0
        assert response.json()["userVote"] is None

    @pytest.mark.asyncio
    async def test_switch_vote(self, client):
        await client.post("/posts/42/vote", json={"voteType": 1}, headers=caller(7))

        response = await client.post(
            "/posts/42/vote", json={"voteType": -1}, headers=caller(7)
        )

        assert response.json()["voteCount"] == -1
        assert response.json()["userVote"] == -1

    @pytest.mark.asyncio
    async def test_remove_vote(self, client):
        await client.post("/posts/42/vote", json={"voteType": 1}, headers=caller(7))
        await client.post("/posts/42/vote", json={"voteType": 1}, headers=caller(8))

        response = await client.delete("/posts/42/vote", headers=caller(7))

        assert response.status_code == 200
        assert response.json()["voteCount"] == 1
        assert response.json()["userVote"] is None

    @pytest.mark.asyncio
    async def test_remove_without_vote_succeeds(self, client):
        response = await client.delete("/posts/42/vote", headers=caller(7))

        assert response.status_code == 200
        assert response.json()["voteCount"] == 0

    @pytest.mark.asyncio
    async def test_get_summary_with_and_without_caller(self, client):
        await client.post("/posts/42/vote", json={"voteType": 1}, headers=caller(7))

        mine = await client.get("/posts/42/vote", headers=caller(7))
        anonymous = await client.get("/posts/42/vote")

        assert mine.json()["userVote"] == 1
        assert anonymous.status_code == 200
        assert anonymous.json()["voteCount"] == 1
        assert anonymous.json()["userVote"] is None

    @pytest.mark.asyncio
    async def test_batch_user_votes(self, client, container):
        store = await container.get(InMemoryStore)
        store.add_post(43)
        await client.post("/posts/43/vote", json={"voteType": -1}, headers=caller(7))

        response = await client.get(
            "/posts/votes", params=[("ids", 42), ("ids", 43)], headers=caller(7)
        )

        assert response.status_code == 200
        assert response.json()["votes"] == {"43": -1}


class TestCommentVoteRoutes:
    """Tests for /comments/{comment_id}/vote."""

    @pytest.mark.asyncio
    async def test_downvote_comment(self, client):
        response = await client.post(
            "/comments/9/vote", json={"voteType": -1}, headers=caller(7)
        )

        assert response.status_code == 200
        assert response.json()["voteCount"] == -1
        assert response.json()["votableType"] == "comment"

    @pytest.mark.asyncio
    async def test_remove_and_read_comment_vote(self, client):
        await client.post("/comments/9/vote", json={"voteType": 1}, headers=caller(7))

        removed = await client.delete("/comments/9/vote", headers=caller(7))
        summary = await client.get("/comments/9/vote", headers=caller(7))

        assert removed.json()["voteCount"] == 0
        assert summary.json() == removed.json()

    @pytest.mark.asyncio
    async def test_batch_user_votes_without_ids(self, client):
        response = await client.get("/comments/votes", headers=caller(7))

        assert response.status_code == 200
        assert response.json()["votes"] == {}


class TestErrorMapping:
    """Domain errors map to HTTP status codes."""

    @pytest.mark.asyncio
    async def test_missing_identity_is_unauthorized(self, client):
        response = await client.post("/posts/42/vote", json={"voteType": 1})

        assert response.status_code == 401

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "user_id",
        ["abc", "0", "-3", "", "+5", "1 2", b"\xb2", "2147483648", "9" * 5000],
    )
    async def test_malformed_identity_is_unauthorized(self, client, user_id):
        response = await client.delete(
            "/posts/42/vote", headers={"X-User-Id": user_id}
        )

        assert response.status_code == 401

    @pytest.mark.asyncio
    @pytest.mark.parametrize("vote_type", [0, 2, -2])
    async def test_invalid_vote_type_is_unprocessable(self, client, vote_type):
        response = await client.post(
            "/posts/42/vote", json={"voteType": vote_type}, headers=caller(7)
        )

        assert response.status_code == 422
        assert "invalid vote type" in response.json()["error"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("vote_type", [True, "1", 1.0, None])
    async def test_non_integer_vote_type_is_unprocessable(self, client, vote_type):
        """Booleans, strings and floats are not coerced into a vote."""
        response = await client.post(
            "/posts/42/vote", json={"voteType": vote_type}, headers=caller(7)
        )
        summary = await client.get("/posts/42/vote", headers=caller(7))

        assert response.status_code == 422
        assert summary.json()["voteCount"] == 0
        assert summary.json()["userVote"] is None

    @pytest.mark.asyncio
    async def test_invalid_target_id_is_unprocessable(self, client):
        response = await client.post(
            "/comments/0/vote", json={"voteType": 1}, headers=caller(7)
        )

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_missing_post_is_not_found(self, client):
        response = await client.post(
            "/posts/404/vote", json={"voteType": 1}, headers=caller(7)
        )

        assert response.status_code == 404
        assert response.json() == {"error": "Post not found: 404"}

    @pytest.mark.asyncio
    async def test_id_past_column_range_is_not_found(self, client):
        cast = await client.post(
            "/posts/99999999999/vote", json={"voteType": 1}, headers=caller(7)
        )
        read = await client.get("/comments/99999999999/vote")
        batch = await client.get(
            "/posts/votes", params={"ids": 99999999999}, headers=caller(7)
        )

        assert cast.status_code == 404
        assert read.status_code == 404
        assert batch.status_code == 200
        assert batch.json()["votes"] == {}

    @pytest.mark.asyncio
    async def test_store_outage_is_service_unavailable(self, client, monkeypatch):
        async def unavailable(self, target):
            raise TransientStoreError("Store unavailable: timeout")

        monkeypatch.setattr(InMemoryTargetRepository, "get_vote_count", unavailable)
        monkeypatch.setattr(
            "gossip.application.usecase.vote.retry.asyncio.sleep", _no_sleep
        )

        response = await client.get("/posts/42/vote")

        assert response.status_code == 503
        assert response.headers["Retry-After"] == "1"


async def _no_sleep(delay: float) -> None:
    return None


class TestHealth:
    @pytest.mark.asyncio
    async def test_health(self, client):
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
