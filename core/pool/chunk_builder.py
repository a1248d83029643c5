"""
Chunk Builder - Capped Rotation Sets

Builds the study chunk for a round once the trainer is in chunk rotation.
Each chunk mixes three sources:
1. One reserved new item: a corpus index never studied (when any remain)
2. Groups: long-studied material from previously passed chunks (60%)
3. Reservoir: studied items not yet absorbed into a group (40%)

Chunk Logic:
- Fill groups and reservoir quotas by sampling without replacement
- Top up shortfall from the reservoir, then from groups
- Top up remaining shortfall with further new items (cursor scan)
- Append the reserved new item last and truncate to CHUNK_CAP
"""

from __future__ import annotations

import math
import random
from typing import Iterable, Optional

from loguru import logger

from core.pool.constants import CHUNK_CAP, GROUP_FRACTION, NEW_ITEM_SCAN_PASSES
from core.pool.pool_types import ChunkRotation, ProgressState
from core.pool.sampler import difference, sample_without_replacement


def pick_next_new(
    regime: ChunkRotation,
    studied: set[int],
    corpus_size: int,
    exclude: Iterable[int] = ()
) -> Optional[int]:
    """
    Pick the next never-studied corpus index with a wrapping cursor scan.

    The scan starts at the regime's cursor, wraps to 0 and gives up after
    NEW_ITEM_SCAN_PASSES passes. Advances the cursor past the picked index.

    Args:
        regime: Chunk regime whose cursor is advanced
        studied: Indices already studied
        corpus_size: Number of corpus items
        exclude: Indices that must not be picked

    Returns:
        A corpus index, or None when every candidate is studied or excluded
    """
    if corpus_size <= 0:
        return None

    excluded = set(exclude)
    start = regime.new_item_cursor if 0 <= regime.new_item_cursor < corpus_size else 0
    for _ in range(NEW_ITEM_SCAN_PASSES):
        for index in range(start, corpus_size):
            if index not in studied and index not in excluded:
                regime.new_item_cursor = (index + 1) % corpus_size
                return index
        start = 0
    regime.new_item_cursor = 0
    return None


def refresh_new_item_pool(state: ProgressState, corpus_size: int) -> None:
    """
    Recompute the never-studied index pool of a chunk regime.
    """
    studied = set(state.studied)
    state.regime.new_item_pool = [i for i in range(corpus_size) if i not in studied]


def build_chunk(
    state: ProgressState,
    corpus_size: int,
    rng: Optional[random.Random] = None,
    chunk_cap: int = CHUNK_CAP,
    group_fraction: float = GROUP_FRACTION
) -> list[int]:
    """
    Build the next chunk and store it as the regime's current set.

    Mutates `state` in place (cursor and current set); callers that need
    the previous state must copy it first.

    Args:
        state: Progress state in chunk rotation
        corpus_size: Number of corpus items
        rng: Random source for sampling
        chunk_cap: Maximum chunk size
        group_fraction: Share of the non-new slots drawn from groups

    Returns:
        The new chunk (also assigned to state.regime.current_set)
    """
    regime = state.regime
    if not isinstance(regime, ChunkRotation):
        raise ValueError("build_chunk requires a chunk rotation state")

    if corpus_size <= 0:
        regime.current_set = []
        return []

    studied = set(state.studied)
    grouped = [i for i in regime.grouped() if 0 <= i < corpus_size]
    reservoir = [i for i in difference(state.studied, grouped) if 0 <= i < corpus_size]

    exclude: set[int] = set()
    new_index = pick_next_new(regime, studied, corpus_size, exclude)
    new_count = 0 if new_index is None else 1
    if new_index is not None:
        exclude.add(new_index)

    base = max(0, chunk_cap - new_count)
    from_groups = math.floor(base * group_fraction)
    from_reservoir = base - from_groups

    picked_groups = sample_without_replacement(grouped, from_groups, exclude, rng)
    exclude.update(picked_groups)
    picked_reservoir = sample_without_replacement(reservoir, from_reservoir, exclude, rng)
    exclude.update(picked_reservoir)
    selected = picked_groups + picked_reservoir

    # Top up: reservoir first, then groups
    for source in (reservoir, grouped):
        if len(selected) >= base:
            break
        extra = sample_without_replacement(source, base - len(selected), exclude, rng)
        selected.extend(extra)
        exclude.update(extra)

    topped_up_new = 0
    while len(selected) < base:
        extra_new = pick_next_new(regime, studied, corpus_size, exclude)
        if extra_new is None:
            break
        selected.append(extra_new)
        exclude.add(extra_new)
        topped_up_new += 1

    if new_index is not None:
        selected.append(new_index)
    chunk = selected[:chunk_cap]

    logger.debug(
        "Built chunk of {} (groups={}, reservoir={}, topped-up new={}, reserved new={})",
        len(chunk),
        len(picked_groups),
        len(picked_reservoir),
        topped_up_new,
        new_index,
    )
    regime.current_set = chunk
    return chunk
