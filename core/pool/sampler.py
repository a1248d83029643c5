"""
Sampling utilities for the pool scheduler.

These helpers provide shared, minimal primitives for drawing study indices
without enforcing a single scheduling policy. Randomness is always injected
so a seeded ``random.Random`` replays the same pools.
"""

from __future__ import annotations
import random
from typing import Hashable, Iterable, Optional, Sequence, TypeVar


T = TypeVar("T", bound=Hashable)


def sample_without_replacement(
    population: Sequence[T],
    k: int,
    exclude: Optional[Iterable[T]] = None,
    rng: Optional[random.Random] = None
) -> list[T]:
    """
    Draw up to k distinct elements from population, skipping exclude.

    The remainder is Fisher-Yates shuffled and the first min(k, remaining)
    elements are returned. Asking for more than is available saturates
    instead of raising. The population itself is never modified.

    Args:
        population: Candidate elements (order irrelevant)
        k: Number of elements wanted
        exclude: Elements that must not be drawn
        rng: Random source (module-level random when omitted)

    Returns:
        Newly allocated list of drawn elements
    """
    if k <= 0:
        return []

    excluded = set(exclude) if exclude else set()
    remaining = [item for item in population if item not in excluded]
    (rng or random).shuffle(remaining)
    return remaining[:k]


def union_many(groups: Iterable[Iterable[T]]) -> list[T]:
    """
    Flatten groups into a de-duplicated list, keeping first-seen order.
    """
    seen: dict[T, None] = {}
    for group in groups:
        for item in group:
            seen.setdefault(item, None)
    return list(seen)


def difference(items: Iterable[T], excluded: Iterable[T]) -> list[T]:
    """
    Items not in excluded, in their original order.
    """
    excluded_set = set(excluded)
    return [item for item in items if item not in excluded_set]
