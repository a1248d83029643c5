"""
Tests for the pool scheduler: small-pool growth, the one-way switch into
chunk rotation and the state invariants that must hold after every round.
"""

import random

from core import pool
from core.pool import ChunkRotation, Outcome, ProgressState, SmallPool
from core.schemas import TrainerConfig


def _pass_until_chunk_mode(state, corpus_size, config, rng, limit=100):
    passes = 0
    while isinstance(state.regime, SmallPool):
        state = pool.apply_outcome(state, Outcome.PASS, corpus_size, config, rng)
        passes += 1
        assert passes < limit
    return state, passes


# ---- Initial pool ----

def test_initial_pool_is_random_subset_of_corpus(config, rng):
    state = pool.initial_progress(30, config, rng)

    assert isinstance(state.regime, SmallPool)
    selected = state.regime.selected
    assert len(selected) == 5
    assert len(set(selected)) == 5
    assert all(0 <= i < 30 for i in selected)
    assert state.regime.pool_size == 5
    assert state.studied == []
    assert state.round == 1


def test_initial_pool_is_capped_by_corpus_size(config, rng):
    state = pool.initial_progress(3, config, rng)
    assert sorted(state.regime.selected) == [0, 1, 2]


def test_empty_corpus_gives_empty_pool(config, rng):
    state = pool.initial_progress(0, config, rng)
    assert pool.active_indices(state) == []


def test_prepare_round_seeds_from_stored_pool_size(config, rng):
    state = ProgressState(regime=SmallPool(selected=[], pool_size=8))
    prepared = pool.prepare_round(state, 30, config, rng)
    assert len(prepared.regime.selected) == 8


def test_prepare_round_drops_indices_beyond_corpus(config, rng):
    state = ProgressState(regime=SmallPool(selected=[0, 4, 50], pool_size=3))
    prepared = pool.prepare_round(state, 10, config, rng)
    assert prepared.regime.selected == [0, 4]
    assert prepared.regime.pool_size == 2


# ---- Small pool ----

def test_pass_grows_pool_and_marks_it_studied(config, rng):
    state = pool.initial_progress(30, config, rng)
    before = list(state.regime.selected)

    after = pool.apply_outcome(state, Outcome.PASS, 30, config, rng)

    assert set(after.studied) == set(before)
    assert len(after.regime.selected) == 6
    assert set(before) <= set(after.regime.selected)
    assert after.regime.pool_size == 6
    assert after.round == 2


def test_apply_outcome_does_not_mutate_input(config, rng):
    state = pool.initial_progress(30, config, rng)
    before = list(state.regime.selected)

    pool.apply_outcome(state, Outcome.PASS, 30, config, rng)

    assert state.regime.selected == before
    assert state.studied == []
    assert state.round == 1


def test_fail_keeps_pool_unchanged(config, rng):
    state = pool.initial_progress(30, config, rng)
    after = pool.apply_outcome(state, Outcome.FAIL, 30, config, rng)

    assert after.regime.selected == state.regime.selected
    assert after.studied == []
    assert after.round == 2


def test_pool_stops_growing_at_corpus_size(rng):
    config = TrainerConfig(initial_count=5, increment=3)
    state = pool.initial_progress(10, config, rng)
    for _ in range(5):
        state = pool.apply_outcome(state, Outcome.PASS, 10, config, rng)

    assert isinstance(state.regime, SmallPool)
    assert sorted(state.regime.selected) == list(range(10))


# ---- Chunk rotation ----

def test_switches_to_chunk_rotation_when_pool_would_exceed_cap(config, rng):
    state = pool.initial_progress(30, config, rng)
    state, passes = _pass_until_chunk_mode(state, 30, config, rng)

    # 5 -> 20 takes 15 passes; the 16th would make 21
    assert passes == 16
    assert state.chunk_mode_enabled
    assert len(state.studied) == 20

    chunk = pool.active_indices(state)
    assert len(chunk) == pool.CHUNK_CAP
    assert len(set(chunk)) == len(chunk)
    unstudied = [i for i in chunk if i not in set(state.studied)]
    assert len(unstudied) == 1
    assert chunk[-1] == unstudied[0]


def test_chunk_rotation_never_reverts_on_fail(config, rng):
    state = pool.initial_progress(30, config, rng)
    state, _ = _pass_until_chunk_mode(state, 30, config, rng)
    chunk = pool.active_indices(state)

    failed = pool.apply_outcome(state, Outcome.FAIL, 30, config, rng)

    assert isinstance(failed.regime, ChunkRotation)
    assert pool.active_indices(failed) == chunk
    assert failed.studied == state.studied


def test_chunk_pass_commits_group(config, rng):
    state = pool.initial_progress(30, config, rng)
    state, _ = _pass_until_chunk_mode(state, 30, config, rng)
    chunk = pool.active_indices(state)

    after = pool.apply_outcome(state, Outcome.PASS, 30, config, rng)

    assert after.regime.groups == [chunk]
    assert set(chunk) <= set(after.studied)
    assert after.regime.current_set is not None
    assert len(after.regime.current_set) <= pool.CHUNK_CAP


def test_invariants_hold_over_many_rounds():
    rng = random.Random(99)
    config = TrainerConfig(initial_count=5, increment=4)
    corpus_size = 60
    state = pool.initial_progress(corpus_size, config, rng)

    for _ in range(60):
        outcome = Outcome.PASS if rng.random() < 0.7 else Outcome.FAIL
        was_chunk = state.chunk_mode_enabled
        state = pool.apply_outcome(state, outcome, corpus_size, config, rng)
        state = pool.prepare_round(state, corpus_size, config, rng)

        assert len(set(state.studied)) == len(state.studied)
        assert all(0 <= i < corpus_size for i in state.studied)
        if was_chunk:
            assert state.chunk_mode_enabled

        active = pool.active_indices(state)
        assert len(set(active)) == len(active)
        assert all(0 <= i < corpus_size for i in active)
        assert len(active) <= pool.CHUNK_CAP

        if isinstance(state.regime, ChunkRotation):
            assert set(state.regime.grouped()) <= set(state.studied)
            assert set(state.reservoir).isdisjoint(state.regime.grouped())
            assert set(state.studied) == set(state.regime.grouped()) | set(state.reservoir)
            assert set(state.regime.new_item_pool).isdisjoint(state.studied)

    assert state.chunk_mode_enabled


def test_oversized_stored_pool_size_switches_to_chunk_rotation(config, rng):
    state = ProgressState(regime=SmallPool(selected=[], pool_size=40))

    prepared = pool.prepare_round(state, 60, config, rng)

    assert prepared.chunk_mode_enabled
    assert len(pool.active_indices(prepared)) == pool.CHUNK_CAP


def test_oversized_selection_switches_to_chunk_rotation(config, rng):
    state = ProgressState(studied=list(range(10)), regime=SmallPool(selected=list(range(25)), pool_size=25))

    prepared = pool.prepare_round(state, 60, config, rng)

    assert prepared.chunk_mode_enabled
    assert len(pool.active_indices(prepared)) <= pool.CHUNK_CAP


def test_migrated_legacy_pool_size_never_presents_more_than_cap(config, rng):
    legacy = pool.migrate_progress({"studiedIdxs": list(range(20)), "poolSize": 25})
    prepared = pool.prepare_round(legacy, 60, config, rng)
    assert len(pool.active_indices(prepared)) == pool.CHUNK_CAP

    stored = pool.migrate_progress({"version": 2, "chunkModeEnabled": False, "poolSize": 40})
    prepared = pool.prepare_round(stored, 60, config, rng)
    assert prepared.chunk_mode_enabled
    assert len(pool.active_indices(prepared)) <= pool.CHUNK_CAP
