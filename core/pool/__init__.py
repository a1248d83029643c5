"""
Pool - RSVP Study Pool Scheduler

Decides which corpus indices are presented and tested each round.

Two regimes:
- Small pool: the active pool grows by `increment` on every pass
- Chunk rotation: once the pool would exceed CHUNK_CAP, each round tests a
  capped chunk mixing committed groups, the reservoir and one new item

Quick start:
    from core import pool

    state = pool.initial_progress(len(corpus), config, rng)
    indices = pool.active_indices(state)

    # After grading the round
    state = pool.apply_outcome(state, pool.Outcome.PASS, len(corpus), config, rng)
    store.write(PROGRESS_KEY, pool.progress_to_record(state))
"""

# Scheduler API (pure transitions)
from core.pool.scheduler import (
    active_indices,
    apply_outcome,
    initial_progress,
    prepare_round,
)

# Chunk construction
from core.pool.chunk_builder import build_chunk, pick_next_new

# Records
from core.pool.migration import migrate_progress, progress_to_record

# State types
from core.pool.pool_types import (
    ChunkRotation,
    Outcome,
    ProgressState,
    SmallPool,
)

# Sampling
from core.pool.sampler import sample_without_replacement

# Constants
from core.pool.constants import CHUNK_CAP, GROUP_FRACTION, SCHEMA_VERSION


__all__ = [
    # Scheduler
    "active_indices",
    "apply_outcome",
    "initial_progress",
    "prepare_round",

    # Chunks
    "build_chunk",
    "pick_next_new",

    # Records
    "migrate_progress",
    "progress_to_record",

    # State
    "ChunkRotation",
    "Outcome",
    "ProgressState",
    "SmallPool",

    # Sampling
    "sample_without_replacement",

    # Parameters
    "CHUNK_CAP",
    "GROUP_FRACTION",
    "SCHEMA_VERSION",
]
