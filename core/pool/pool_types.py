"""
Typed progress models shared by the pool scheduler.

The scheduler runs in exactly one of two regimes, modelled as a tagged
union so each variant only carries the fields it needs:

- SmallPool: the active pool grows by `increment` on every pass
- ChunkRotation: each round tests a capped chunk built from groups,
  reservoir and fresh corpus items

The move from SmallPool to ChunkRotation is one-way.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

from core.pool.constants import SCHEMA_VERSION
from core.pool.sampler import difference, union_many


class Outcome(str, Enum):
    """Result of a recall round."""
    PASS = "pass"
    FAIL = "fail"


@dataclass
class SmallPool:
    """
    Grow-by-increment regime state.
    """
    selected: list[int] = field(default_factory=list)
    pool_size: int = 0  # Cached len(selected); seeds the pool when selected is empty


@dataclass
class ChunkRotation:
    """
    Capped chunk rotation regime state.
    """
    groups: list[list[int]] = field(default_factory=list)
    current_set: Optional[list[int]] = None
    new_item_cursor: int = 0
    new_item_pool: list[int] = field(default_factory=list)

    def grouped(self) -> list[int]:
        """Union of all committed groups."""
        return union_many(self.groups)


Regime = Union[SmallPool, ChunkRotation]


@dataclass
class ProgressState:
    """
    Persisted scheduler state for one trainer.
    """
    studied: list[int] = field(default_factory=list)
    regime: Regime = field(default_factory=SmallPool)
    round: int = 1
    show_reading: bool = True
    show_meaning: bool = True
    version: int = SCHEMA_VERSION

    @property
    def chunk_mode_enabled(self) -> bool:
        return isinstance(self.regime, ChunkRotation)

    @property
    def reservoir(self) -> list[int]:
        """
        Studied indices not yet absorbed into any group (studied order).
        """
        if isinstance(self.regime, ChunkRotation):
            return difference(self.studied, self.regime.grouped())
        return list(self.studied)

    def mark_studied(self, indices: list[int]) -> None:
        """
        Append indices to `studied`, keeping it unique and insertion-ordered.
        """
        known = set(self.studied)
        for index in indices:
            if index not in known:
                self.studied.append(index)
                known.add(index)
