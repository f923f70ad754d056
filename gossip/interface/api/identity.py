"""Caller identity for vote routes.

Tokens are verified by the upstream auth gateway, which forwards the
authenticated user's ID in the X-User-Id header. This service trusts it.
"""

import re

from fastapi import Header, HTTPException, status

from gossip.domain.value import MAX_ID

USER_ID_HEADER = "X-User-Id"

_USER_ID_PATTERN = re.compile(r"[0-9]{1,10}")


def _parse_user_id(raw: str | None) -> int | None:
    if raw is None or not _USER_ID_PATTERN.fullmatch(raw.strip()):
        return None
    user_id = int(raw)
    return user_id if 0 < user_id <= MAX_ID else None


async def require_caller_id(
    x_user_id: str | None = Header(default=None, alias=USER_ID_HEADER),
) -> int:
    """Resolve the authenticated caller, rejecting anonymous requests."""
    user_id = _parse_user_id(x_user_id)
    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to vote",
        )
    return user_id


async def optional_caller_id(
    x_user_id: str | None = Header(default=None, alias=USER_ID_HEADER),
) -> int | None:
    """Resolve the caller if authenticated, otherwise None."""
    return _parse_user_id(x_user_id)
