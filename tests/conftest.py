"""Test configuration and fixtures."""

import logfire

from gossip.domain.value import VotableType, VoteTarget
from gossip.persistence.repository.inmemory import InMemoryStore

# Spans stay in-process during tests
logfire.configure(send_to_logfire=False, console=False)


def seed_targets(store: InMemoryStore, *targets: VoteTarget) -> None:
    """Create posts and comments in the in-memory store.

    Posts and comments are owned by the content subsystem; tests only need
    them to exist with a zero vote count.

    Args:
        store: In-memory store backing the test container
        targets: Targets to create
    """
    for target in targets:
        if target.kind == VotableType.POST:
            store.add_post(target.id)
        else:
            store.add_comment(target.id)


def live_sum(store: InMemoryStore, target: VoteTarget) -> int:
    """Signed sum of the live votes on a target."""
    return sum(
        int(vote.vote_type) for vote in store.votes.values() if vote.target == target
    )


def cached_count(store: InMemoryStore, target: VoteTarget) -> int:
    """Cached vote_count of a target."""
    return store.vote_counts[(target.kind, target.id)]
