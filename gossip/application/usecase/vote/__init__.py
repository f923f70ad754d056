"""Vote use cases."""

from .cast_vote import CastVoteRequest, CastVoteUseCase
from .get_user_votes import (
    GetUserVotesRequest,
    GetUserVotesResponse,
    GetUserVotesUseCase,
)
from .get_vote_summary import GetVoteSummaryRequest, GetVoteSummaryUseCase
from .remove_vote import RemoveVoteRequest, RemoveVoteUseCase
from .schema import VoteSummaryResponse

__all__ = [
    "CastVoteRequest",
    "CastVoteUseCase",
    "GetUserVotesRequest",
    "GetUserVotesResponse",
    "GetUserVotesUseCase",
    "GetVoteSummaryRequest",
    "GetVoteSummaryUseCase",
    "RemoveVoteRequest",
    "RemoveVoteUseCase",
    "VoteSummaryResponse",
]
