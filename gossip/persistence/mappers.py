"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict

from gossip.domain.model import Vote
from gossip.domain.value import CommentId, PostId, UserId, VoteId, VoteType


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model.

    Args:
        row: Database row as dict

    Returns:
        Vote domain model
    """
    return Vote(
        id=VoteId(row["id"]),
        user_id=UserId(row["user_id"]),
        post_id=PostId(row["post_id"]) if row.get("post_id") is not None else None,
        comment_id=(
            CommentId(row["comment_id"])
            if row.get("comment_id") is not None
            else None
        ),
        vote_type=VoteType(row["vote_type"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )
