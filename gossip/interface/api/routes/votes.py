"""Vote routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, Field, StrictInt

from gossip.application.usecase.vote import (
    CastVoteRequest,
    CastVoteUseCase,
    GetUserVotesRequest,
    GetUserVotesResponse,
    GetUserVotesUseCase,
    GetVoteSummaryRequest,
    GetVoteSummaryUseCase,
    RemoveVoteRequest,
    RemoveVoteUseCase,
    VoteSummaryResponse,
)
from gossip.domain.value import VotableType
from gossip.interface.api.identity import optional_caller_id, require_caller_id

router = APIRouter(tags=["votes"], route_class=DishkaRoute)


class VoteAPIRequest(BaseModel):
    """API request for casting a vote."""

    vote_type: StrictInt = Field(alias="voteType")  # 1 for upvote, -1 for downvote


@router.post("/posts/{post_id}/vote", response_model=VoteSummaryResponse)
async def vote_on_post(
    post_id: int,
    request: VoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    user_id: int = Depends(require_caller_id),
) -> VoteSummaryResponse:
    """Vote on a post.

    Casting the same direction twice removes the vote; casting the opposite
    direction switches it. Requires authentication.

    Returns:
        Updated vote count and the caller's resulting vote
    """
    return await cast_vote_use_case.execute(
        CastVoteRequest(
            votable_type=VotableType.POST,
            votable_id=post_id,
            user_id=user_id,
            vote_type=request.vote_type,
        )
    )


@router.delete("/posts/{post_id}/vote", response_model=VoteSummaryResponse)
async def remove_vote_from_post(
    post_id: int,
    remove_vote_use_case: FromDishka[RemoveVoteUseCase],
    user_id: int = Depends(require_caller_id),
) -> VoteSummaryResponse:
    """Remove the caller's vote from a post. Requires authentication."""
    return await remove_vote_use_case.execute(
        RemoveVoteRequest(
            votable_type=VotableType.POST, votable_id=post_id, user_id=user_id
        )
    )


@router.get("/posts/{post_id}/vote", response_model=VoteSummaryResponse)
async def get_post_votes(
    post_id: int,
    get_vote_summary_use_case: FromDishka[GetVoteSummaryUseCase],
    user_id: int | None = Depends(optional_caller_id),
) -> VoteSummaryResponse:
    """Get a post's vote count, plus the caller's vote when authenticated."""
    return await get_vote_summary_use_case.execute(
        GetVoteSummaryRequest(
            votable_type=VotableType.POST, votable_id=post_id, user_id=user_id
        )
    )


@router.get("/posts/votes", response_model=GetUserVotesResponse)
async def get_my_post_votes(
    get_user_votes_use_case: FromDishka[GetUserVotesUseCase],
    ids: list[int] = Query(default=[]),
    user_id: int = Depends(require_caller_id),
) -> GetUserVotesResponse:
    """Get the caller's votes on a batch of posts (e.g. a listing page)."""
    return await get_user_votes_use_case.execute(
        GetUserVotesRequest(
            votable_type=VotableType.POST, votable_ids=ids, user_id=user_id
        )
    )


@router.post("/comments/{comment_id}/vote", response_model=VoteSummaryResponse)
async def vote_on_comment(
    comment_id: int,
    request: VoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    user_id: int = Depends(require_caller_id),
) -> VoteSummaryResponse:
    """Vote on a comment. Same toggle/switch rules as posts."""
    return await cast_vote_use_case.execute(
        CastVoteRequest(
            votable_type=VotableType.COMMENT,
            votable_id=comment_id,
            user_id=user_id,
            vote_type=request.vote_type,
        )
    )


@router.delete("/comments/{comment_id}/vote", response_model=VoteSummaryResponse)
async def remove_vote_from_comment(
    comment_id: int,
    remove_vote_use_case: FromDishka[RemoveVoteUseCase],
    user_id: int = Depends(require_caller_id),
) -> VoteSummaryResponse:
    """Remove the caller's vote from a comment. Requires authentication."""
    return await remove_vote_use_case.execute(
        RemoveVoteRequest(
            votable_type=VotableType.COMMENT, votable_id=comment_id, user_id=user_id
        )
    )


@router.get("/comments/{comment_id}/vote", response_model=VoteSummaryResponse)
async def get_comment_votes(
    comment_id: int,
    get_vote_summary_use_case: FromDishka[GetVoteSummaryUseCase],
    user_id: int | None = Depends(optional_caller_id),
) -> VoteSummaryResponse:
    """Get a comment's vote count, plus the caller's vote when authenticated."""
    return await get_vote_summary_use_case.execute(
        GetVoteSummaryRequest(
            votable_type=VotableType.COMMENT, votable_id=comment_id, user_id=user_id
        )
    )


@router.get("/comments/votes", response_model=GetUserVotesResponse)
async def get_my_comment_votes(
    get_user_votes_use_case: FromDishka[GetUserVotesUseCase],
    ids: list[int] = Query(default=[]),
    user_id: int = Depends(require_caller_id),
) -> GetUserVotesResponse:
    """Get the caller's votes on a batch of comments (e.g. a thread)."""
    return await get_user_votes_use_case.execute(
        GetUserVotesRequest(
            votable_type=VotableType.COMMENT, votable_ids=ids, user_id=user_id
        )
    )
