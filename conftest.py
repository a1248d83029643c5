"""
Pytest configuration and shared fixtures.
"""

import copy
import random

import pytest

from core.schemas import CorpusItem, TrainerConfig


class MemoryStore:
    """In-memory stand-in for ProgressStore (same read/write/delete API)."""

    def __init__(self):
        self.records = {}

    def read(self, key):
        record = self.records.get(key)
        return copy.deepcopy(record) if record is not None else None

    def write(self, key, record):
        self.records[key] = copy.deepcopy(record)

    def delete(self, key):
        self.records.pop(key, None)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def make_corpus():
    def _make(size):
        return [
            CorpusItem(word=f"word{i}", reading=f"reading{i}", meaning=f"meaning {i}")
            for i in range(size)
        ]
    return _make


@pytest.fixture
def corpus(make_corpus):
    return make_corpus(30)


@pytest.fixture
def config():
    return TrainerConfig(initial_count=5, speed_ms=500, increment=1)


@pytest.fixture
def store():
    return MemoryStore()
