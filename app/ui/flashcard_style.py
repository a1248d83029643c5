"""
Word card style presets and constants.
"""

from __future__ import annotations

from dataclasses import dataclass


# ---- Shared Card Layout ----

CARD_PADDING = "35px 24px"
CARD_MIN_HEIGHT = "240px"
CARD_BG_COLOR = "#f0f2f6"
STUDIED_BG_COLOR = "#e8f4f8"


# ---- Shared Typography Defaults ----

DEFAULT_WORD_FONT_SIZE = "3.2em"
DEFAULT_WORD_COLOR = "#1f1f1f"
DEFAULT_READING_FONT_SIZE = "1.3em"
DEFAULT_READING_COLOR = "#666"
DEFAULT_MEANING_FONT_SIZE = "1.2em"
DEFAULT_MEANING_COLOR = "#666"


@dataclass(frozen=True)
class WordCardStyle:
    """
    Visual style preset for word cards.
    """
    word_font_size: str = DEFAULT_WORD_FONT_SIZE
    word_color: str = DEFAULT_WORD_COLOR
    reading_font_size: str = DEFAULT_READING_FONT_SIZE
    reading_color: str = DEFAULT_READING_COLOR
    meaning_font_size: str = DEFAULT_MEANING_FONT_SIZE
    meaning_color: str = DEFAULT_MEANING_COLOR
    meaning_style: str = "italic"
    min_height: str = CARD_MIN_HEIGHT
    bg_color: str = CARD_BG_COLOR


# ---- Presets ----

RSVP_STYLE = WordCardStyle()

STUDIED_STYLE = WordCardStyle(
    word_font_size="1.6em",
    reading_font_size="0.95em",
    meaning_font_size="0.9em",
    meaning_style="normal",
    min_height="0",
    bg_color=STUDIED_BG_COLOR,
)
