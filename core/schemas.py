"""
Pydantic models for the vocabulary corpus and trainer settings.

Corpus records mirror the JSON documents served by the corpus source
(`word`, `reading`, `meaning`, `pos`, `speech`, `speechMime`).
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from core.pool.constants import (
    DEFAULT_INCREMENT,
    DEFAULT_INITIAL_COUNT,
    DEFAULT_SPEED_MS,
    MAX_INCREMENT,
    MAX_INITIAL_COUNT,
    MIN_INCREMENT,
    MIN_INITIAL_COUNT,
    MIN_SPEED_MS,
)


# ---- Corpus ----

class CorpusItem(BaseModel):
    """
    A single vocabulary record.

    Immutable once loaded; addressed only by its position in the corpus.
    """
    word: str = Field(..., description="Display form (e.g. kanji)")
    reading: str = Field(default="", description="Phonetic form (e.g. hiragana)")
    meaning: str = Field(default="", description="Translation shown under the word")
    part_of_speech: str = Field(default="", alias="pos")

    # Pronunciation clip, basE91-encoded as shipped by the corpus source
    speech: Optional[str] = None
    speech_mime: Optional[str] = Field(default=None, alias="speechMime")

    class Config:
        frozen = True
        populate_by_name = True

    @property
    def has_pronunciation(self) -> bool:
        return bool(self.speech)


# ---- Trainer Settings ----

def _clamp(value: object, minimum: int, maximum: Optional[int] = None) -> int:
    try:
        number = max(minimum, int(value))
    except (TypeError, ValueError) as exc:
        raise ValueError(f"expected an integer, got {value!r}") from exc
    if maximum is not None:
        number = min(maximum, number)
    return number


class TrainerConfig(BaseModel):
    """
    Settings chosen at setup. Locked for the life of the progress record;
    changing them requires a reset.
    """
    initial_count: int = Field(default=DEFAULT_INITIAL_COUNT, alias="initialCount", description="Pool seed size")
    speed_ms: int = Field(default=DEFAULT_SPEED_MS, alias="speedMs", description="Display time per item (ms)")
    increment: int = Field(default=DEFAULT_INCREMENT, description="Items added per passed round")
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), alias="createdAt")

    class Config:
        frozen = True
        populate_by_name = True

    def to_record(self) -> dict:
        """JSON-shaped record in the stored camelCase layout."""
        return self.model_dump(mode="json", by_alias=True)

    @field_validator("initial_count", mode="before")
    @classmethod
    def _clamp_initial_count(cls, value: object) -> int:
        return _clamp(value, MIN_INITIAL_COUNT, MAX_INITIAL_COUNT)

    @field_validator("speed_ms", mode="before")
    @classmethod
    def _clamp_speed(cls, value: object) -> int:
        return _clamp(value, MIN_SPEED_MS)

    @field_validator("increment", mode="before")
    @classmethod
    def _clamp_increment(cls, value: object) -> int:
        return _clamp(value, MIN_INCREMENT, MAX_INCREMENT)
