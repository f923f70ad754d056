"""Retry policy for vote operations.

Vote operations are single short transactions, so a failed attempt leaves
nothing behind and can simply be run again.
"""

import asyncio
from collections.abc import Awaitable, Callable
from typing import TypeVar

import logfire

from gossip.config import VotingSettings
from gossip.domain.error import ConflictError, TransientStoreError

T = TypeVar("T")


def backoff_delay(policy: VotingSettings, attempt: int) -> float:
    """Exponential backoff before retry number ``attempt`` (0-based)."""
    return min(
        policy.backoff_max_seconds,
        policy.backoff_initial_seconds * (2**attempt),
    )


async def run_with_retries(
    operation: Callable[[], Awaitable[T]],
    policy: VotingSettings,
    name: str,
) -> T:
    """Run a vote operation, retrying conflicts and transient store failures.

    Args:
        operation: Zero-argument coroutine factory; called once per attempt
        policy: Retry limits and backoff timing
        name: Operation name for logging

    Returns:
        The operation's result

    Raises:
        ConflictError: If conflicts persist past the retry limit
        TransientStoreError: If the store stays unavailable past the retry limit
    """
    conflicts = 0
    transient_failures = 0

    while True:
        try:
            return await operation()
        except ConflictError as e:
            if conflicts >= policy.conflict_retries:
                logfire.warn("Vote conflict not resolved", operation=name, error=str(e))
                raise
            conflicts += 1
            logfire.info("Retrying after vote conflict", operation=name, attempt=conflicts)
        except TransientStoreError as e:
            if transient_failures >= policy.transient_retries:
                logfire.error("Store unavailable", operation=name, error=str(e))
                raise
            delay = backoff_delay(policy, transient_failures)
            transient_failures += 1
            logfire.warn(
                "Retrying after transient store error",
                operation=name,
                attempt=transient_failures,
                delay=delay,
                error=str(e),
            )
            await asyncio.sleep(delay)
