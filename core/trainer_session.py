"""
Trainer session - round lifecycle.

Drives one trainer through present -> recall -> result -> next round,
delegating scheduling to core.pool and grading to core.grading. Every
mutation is read-compute-write of the whole progress record.
"""

from __future__ import annotations

import random
from enum import Enum
from typing import Any, Optional, Protocol

from loguru import logger
from pydantic import ValidationError

from core import pool
from core.corpus_repo import items_for_indices
from core.grading import RecallResult, grade_recall
from core.progress.database import CONFIG_KEY, PROGRESS_KEY
from core.schemas import CorpusItem, TrainerConfig


class Phase(str, Enum):
    """Step of the current round."""
    PRESENT = "present"
    RECALL = "recall"
    RESULT = "result"


class RecordStore(Protocol):
    """Key/value store of JSON-shaped records."""

    def read(self, key: str) -> Optional[dict[str, Any]]: ...

    def write(self, key: str, record: dict[str, Any]) -> None: ...

    def delete(self, key: str) -> None: ...


# ---- Config Records ----

def load_config(store: RecordStore, key: str = CONFIG_KEY) -> Optional[TrainerConfig]:
    """
    Load the trainer settings, or None if never set up (or unreadable).
    """
    raw = store.read(key)
    if raw is None:
        return None
    try:
        return TrainerConfig.model_validate(raw)
    except ValidationError as exc:
        logger.warning("Ignoring malformed trainer config: {}", exc)
        return None


def save_config(store: RecordStore, config: TrainerConfig, key: str = CONFIG_KEY) -> None:
    store.write(key, config.to_record())


# ---- Session ----

class TrainerSession:
    """
    One learner's trainer over a loaded corpus.
    """

    def __init__(
        self,
        store: RecordStore,
        corpus: list[CorpusItem],
        config: TrainerConfig,
        state: pool.ProgressState,
        rng: Optional[random.Random] = None,
        progress_key: str = PROGRESS_KEY,
        config_key: str = CONFIG_KEY
    ):
        self.store = store
        self.corpus = corpus
        self.config = config
        self.state = state
        self.rng = rng or random.Random()
        self.progress_key = progress_key
        self.config_key = config_key

        self.phase = Phase.PRESENT
        self.last_result: Optional[RecallResult] = None
        self.pending_outcome: Optional[pool.Outcome] = None
        self.presentation: list[CorpusItem] = []
        self._shuffle_presentation()

    @classmethod
    def open(
        cls,
        store: RecordStore,
        corpus: list[CorpusItem],
        config: TrainerConfig,
        rng: Optional[random.Random] = None,
        progress_key: str = PROGRESS_KEY,
        config_key: str = CONFIG_KEY
    ) -> "TrainerSession":
        """
        Load (or create) the progress record and ready the first round.

        Args:
            store: Record store holding config and progress
            corpus: Loaded corpus (may be empty)
            config: Trainer settings
            rng: Random source (seed it for deterministic replays)
            progress_key: Store key of the progress record
            config_key: Store key of the config record

        Returns:
            TrainerSession in the PRESENT phase
        """
        rng = rng or random.Random()
        raw = store.read(progress_key)
        state = pool.migrate_progress(raw)
        state = pool.prepare_round(state, len(corpus), config, rng)
        store.write(progress_key, pool.progress_to_record(state))

        logger.info(
            "Opened trainer: corpus={}, studied={}, round={}, chunk mode={}",
            len(corpus),
            len(state.studied),
            state.round,
            state.chunk_mode_enabled,
        )
        return cls(store, corpus, config, state, rng, progress_key, config_key)

    # ---- Views ----

    def active_items(self) -> list[CorpusItem]:
        """Items tested this round, in pool order."""
        return items_for_indices(self.corpus, pool.active_indices(self.state))

    def presentation_order(self) -> list[CorpusItem]:
        """Active items in this round's shuffled display order."""
        return list(self.presentation)

    def studied_items(self) -> list[tuple[int, CorpusItem]]:
        """(corpus index, item) for every studied index still in the corpus."""
        return [(i, self.corpus[i]) for i in self.state.studied if 0 <= i < len(self.corpus)]

    @property
    def studied_count(self) -> int:
        return len(self.state.studied)

    @property
    def round(self) -> int:
        return self.state.round

    @property
    def can_replay(self) -> bool:
        """False while a graded result waits to be continued."""
        return self.phase != Phase.RESULT

    # ---- Round Lifecycle ----

    def finish_presentation(self) -> None:
        """Presentation completed; move on to recall."""
        if self.phase == Phase.PRESENT:
            self.phase = Phase.RECALL

    def replay(self) -> None:
        """
        Present the current active set again in a fresh order.
        """
        if not self.can_replay:
            raise RuntimeError("Cannot replay while a result is pending; continue the round first")
        self.phase = Phase.PRESENT
        self._shuffle_presentation()

    def submit_recall(self, lines: list[str]) -> RecallResult:
        """
        Grade the learner's lines and hold the outcome until continue_round().
        """
        if self.phase == Phase.RESULT:
            raise RuntimeError("A result is already pending")
        result = grade_recall(self.active_items(), lines)
        self.last_result = result
        self.pending_outcome = pool.Outcome.PASS if result.passed else pool.Outcome.FAIL
        self.phase = Phase.RESULT
        logger.info(
            "Round {} graded: {} (missing={}, extras={})",
            self.state.round,
            self.pending_outcome.value,
            len(result.missing),
            len(result.extras),
        )
        return result

    def continue_round(self) -> None:
        """
        Apply the pending outcome, persist it and start the next presentation.
        """
        if self.pending_outcome is not None:
            self.state = pool.apply_outcome(
                self.state,
                self.pending_outcome,
                len(self.corpus),
                self.config,
                self.rng,
            )
            self.state = pool.prepare_round(self.state, len(self.corpus), self.config, self.rng)
            self._save()
            self.pending_outcome = None

        self.phase = Phase.PRESENT
        self._shuffle_presentation()

    def set_display(
        self,
        show_reading: Optional[bool] = None,
        show_meaning: Optional[bool] = None
    ) -> None:
        """Persist the reading/meaning display toggles."""
        if show_reading is not None:
            self.state.show_reading = show_reading
        if show_meaning is not None:
            self.state.show_meaning = show_meaning
        self._save()

    def reset(self) -> None:
        """Discard progress and settings; the trainer must be set up again."""
        self.store.delete(self.progress_key)
        self.store.delete(self.config_key)
        logger.info("Trainer reset after {} rounds", self.state.round)

    # ---- Helpers ----

    def _shuffle_presentation(self) -> None:
        items = self.active_items()
        self.rng.shuffle(items)
        self.presentation = items

    def _save(self) -> None:
        self.store.write(self.progress_key, pool.progress_to_record(self.state))
