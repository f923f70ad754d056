"""Strongly typed identifiers for Gossip domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType

UserId = NewType("UserId", int)
PostId = NewType("PostId", int)
CommentId = NewType("CommentId", int)
VoteId = NewType("VoteId", int)

# IDs are stored in 32-bit INTEGER columns
MAX_ID = 2**31 - 1
