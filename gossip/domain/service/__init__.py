"""Domain services."""

from .base import Service
from .transition import (
    CAST_TRANSITIONS,
    REMOVE_TRANSITIONS,
    VoteAction,
    VoteTransition,
    plan_cast,
    plan_remove,
)
from .vote_service import VoteService

__all__ = [
    "CAST_TRANSITIONS",
    "REMOVE_TRANSITIONS",
    "Service",
    "VoteAction",
    "VoteService",
    "VoteTransition",
    "plan_cast",
    "plan_remove",
]
