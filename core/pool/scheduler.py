"""
Scheduler - Pool Regime Logic

Pure scheduling and state transitions (no database calls).

Main workflow:
1. Load and migrate progress state (caller's responsibility)
2. prepare_round() makes sure an active set exists
3. Grade the round (core.grading)
4. apply_outcome() returns the next state
5. Persist the returned state (caller's responsibility)

Regimes:
- SmallPool: the whole studied pool is tested and grows by `increment`
  on every pass
- ChunkRotation: entered once a pass would grow the pool past CHUNK_CAP;
  each round tests a capped chunk (see chunk_builder). Never reverts.
"""

from __future__ import annotations

import copy
import random
from typing import TYPE_CHECKING, Optional

from loguru import logger

from core.pool.chunk_builder import build_chunk, refresh_new_item_pool
from core.pool.constants import CHUNK_CAP
from core.pool.pool_types import ChunkRotation, Outcome, ProgressState, SmallPool
from core.pool.sampler import sample_without_replacement

if TYPE_CHECKING:
    from core.schemas import TrainerConfig


def active_indices(state: ProgressState) -> list[int]:
    """
    Corpus indices tested in the current round.
    """
    regime = state.regime
    if isinstance(regime, ChunkRotation):
        return list(regime.current_set or [])
    return list(regime.selected)


def initial_progress(
    corpus_size: int,
    config: TrainerConfig,
    rng: Optional[random.Random] = None
) -> ProgressState:
    """
    Create a fresh progress state seeded with a random initial pool.
    """
    return prepare_round(ProgressState(), corpus_size, config, rng)


def prepare_round(
    state: ProgressState,
    corpus_size: int,
    config: TrainerConfig,
    rng: Optional[random.Random] = None
) -> ProgressState:
    """
    Return a copy of state with a ready active set for the next round.

    Indices beyond the corpus (e.g. the corpus shrank between sessions) are
    dropped. An empty small pool is seeded with min(corpus_size, pool_size
    or initial_count) random indices; a chunk regime without a current set
    builds one. A small pool (or stored pool size) above CHUNK_CAP switches
    to chunk rotation instead.

    Args:
        state: Current progress state
        corpus_size: Number of corpus items
        config: Trainer settings
        rng: Random source for sampling

    Returns:
        New ProgressState
    """
    new_state = copy.deepcopy(state)
    regime = new_state.regime

    if isinstance(regime, SmallPool):
        valid = _valid_indices(regime.selected, corpus_size)
        if len(valid) != len(regime.selected):
            logger.warning("Dropped {} out-of-range pool indices", len(regime.selected) - len(valid))
            regime.selected = valid
            regime.pool_size = len(valid)
        size = len(regime.selected) or regime.pool_size or config.initial_count
        if size > CHUNK_CAP:
            logger.warning("Small pool of {} exceeds {}; switching to chunk rotation", size, CHUNK_CAP)
            _enter_chunk_rotation(new_state, corpus_size, rng)
            return new_state
        if not regime.selected:
            count = min(corpus_size, size)
            if count > 0:
                regime.selected = sample_without_replacement(range(corpus_size), count, rng=rng)
                regime.pool_size = len(regime.selected)
        return new_state

    refresh_new_item_pool(new_state, corpus_size)
    if regime.current_set:
        valid = _valid_indices(regime.current_set, corpus_size)
        if len(valid) != len(regime.current_set):
            logger.warning("Dropped {} out-of-range chunk indices", len(regime.current_set) - len(valid))
            regime.current_set = valid or None
    if not regime.current_set:
        build_chunk(new_state, corpus_size, rng)
    return new_state


def apply_outcome(
    state: ProgressState,
    outcome: Outcome,
    corpus_size: int,
    config: TrainerConfig,
    rng: Optional[random.Random] = None
) -> ProgressState:
    """
    Apply a round outcome and return the next progress state.

    This is the only state transition of the scheduler. The input state is
    never mutated.

    Args:
        state: Progress state the round was played with
        outcome: PASS or FAIL
        corpus_size: Number of corpus items
        config: Trainer settings
        rng: Random source for sampling

    Returns:
        New ProgressState with round advanced by one
    """
    new_state = copy.deepcopy(state)
    new_state.round += 1

    if outcome != Outcome.PASS:
        # Fail: the same pool or chunk repeats
        return new_state

    if isinstance(new_state.regime, SmallPool):
        _pass_small_pool(new_state, corpus_size, config, rng)
    else:
        _pass_chunk(new_state, corpus_size, rng)
    return new_state


def _pass_small_pool(
    state: ProgressState,
    corpus_size: int,
    config: TrainerConfig,
    rng: Optional[random.Random]
) -> None:
    regime = state.regime
    pool = list(regime.selected)
    state.mark_studied(pool)

    in_pool = set(pool)
    remaining = [i for i in range(corpus_size) if i not in in_pool]
    added = sample_without_replacement(remaining, min(config.increment, len(remaining)), rng=rng)
    would_be_selected = pool + added

    if len(would_be_selected) > CHUNK_CAP:
        _enter_chunk_rotation(state, corpus_size, rng)
        return

    regime.selected = would_be_selected
    regime.pool_size = len(would_be_selected)


def _enter_chunk_rotation(
    state: ProgressState,
    corpus_size: int,
    rng: Optional[random.Random]
) -> None:
    """
    One-way switch into chunk rotation.

    The passed small pool is already studied, so it becomes the reservoir
    (studied but ungrouped); the first chunk is built immediately.
    """
    state.regime = ChunkRotation()
    refresh_new_item_pool(state, corpus_size)
    chunk = build_chunk(state, corpus_size, rng)
    logger.info(
        "Pool exceeded {} items; switched to chunk rotation (reservoir={}, new pool={}, chunk={})",
        CHUNK_CAP,
        len(state.reservoir),
        len(state.regime.new_item_pool),
        len(chunk),
    )


def _pass_chunk(
    state: ProgressState,
    corpus_size: int,
    rng: Optional[random.Random]
) -> None:
    regime = state.regime
    chunk = list(regime.current_set or [])
    if chunk:
        regime.groups.append(chunk)
        state.mark_studied(chunk)
        logger.info("Committed chunk of {} as group #{}", len(chunk), len(regime.groups))

    refresh_new_item_pool(state, corpus_size)
    regime.current_set = None
    build_chunk(state, corpus_size, rng)


def _valid_indices(indices: list[int], corpus_size: int) -> list[int]:
    return [i for i in indices if 0 <= i < corpus_size]
