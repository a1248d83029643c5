"""
Tests for the sampling primitives used by the pool scheduler.
"""

import random

from core.pool.sampler import difference, sample_without_replacement, union_many


def test_non_positive_k_returns_empty():
    assert sample_without_replacement(range(10), 0) == []
    assert sample_without_replacement(range(10), -3) == []


def test_sample_is_distinct_and_from_population(rng):
    drawn = sample_without_replacement(list(range(50)), 10, rng=rng)
    assert len(drawn) == 10
    assert len(set(drawn)) == 10
    assert all(0 <= i < 50 for i in drawn)


def test_oversized_request_saturates(rng):
    drawn = sample_without_replacement([1, 2, 3, 4, 5], 10, rng=rng)
    assert sorted(drawn) == [1, 2, 3, 4, 5]


def test_exclude_is_respected(rng):
    drawn = sample_without_replacement(list(range(10)), 10, exclude={0, 1, 2}, rng=rng)
    assert sorted(drawn) == list(range(3, 10))


def test_population_is_not_modified(rng):
    population = [5, 4, 3, 2, 1]
    sample_without_replacement(population, 3, rng=rng)
    assert population == [5, 4, 3, 2, 1]


def test_seeded_rng_replays_the_same_draw():
    first = sample_without_replacement(list(range(100)), 7, rng=random.Random(7))
    second = sample_without_replacement(list(range(100)), 7, rng=random.Random(7))
    assert first == second


def test_union_many_keeps_first_seen_order():
    assert union_many([[3, 1], [1, 2], [], [4, 3]]) == [3, 1, 2, 4]


def test_difference_keeps_original_order():
    assert difference([5, 1, 4, 2], [4, 9]) == [5, 1, 2]
