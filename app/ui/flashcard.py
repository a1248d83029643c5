"""
Word Card UI Component

Renders one corpus item as a centered card: reading above, word in the
middle, meaning below. Reading and meaning follow the learner's display
toggles.
"""

from __future__ import annotations

from html import escape

import streamlit as st

from app.ui.flashcard_style import CARD_PADDING, RSVP_STYLE, WordCardStyle
from core.schemas import CorpusItem


def render_word_card(
    item: CorpusItem,
    show_reading: bool = True,
    show_meaning: bool = True,
    footer: str = "",
    style: WordCardStyle | None = None,
) -> None:
    """
    Render a word card.

    Args:
        item: Corpus item to show
        show_reading: Show the reading above the word
        show_meaning: Show the meaning below the word
        footer: Optional small caption under the card (e.g. "3 / 12")
        style: Optional style preset (defaults to the RSVP card)
    """
    style = style or RSVP_STYLE

    reading_html = ""
    if show_reading and item.reading:
        reading_html = (
            f'<div style="font-size: {style.reading_font_size}; color: {style.reading_color}; '
            f'margin-bottom: 8px;">{escape(item.reading)}</div>'
        )

    word_html = (
        f'<h1 style="font-size: {style.word_font_size}; color: {style.word_color}; '
        'font-weight: normal; margin: 0; text-align: center; line-height: 1.3; '
        f'overflow-wrap: anywhere;">{escape(item.word)}</h1>'
    )

    meaning_html = ""
    if show_meaning and item.meaning:
        meaning_html = (
            f'<p style="font-size: {style.meaning_font_size}; color: {style.meaning_color}; '
            f'font-style: {style.meaning_style}; margin: 12px 0 0 0;">{escape(item.meaning)}</p>'
        )

    html = (
        f'<div style="background-color: {style.bg_color}; padding: {CARD_PADDING}; '
        'border-radius: 15px; text-align: center; box-shadow: 0 4px 6px '
        f'rgba(0, 0, 0, 0.1); min-height: {style.min_height}; display: flex; '
        'flex-direction: column; align-items: center; justify-content: center; '
        'user-select: none;">'
        f"{reading_html}{word_html}{meaning_html}</div>"
    )

    st.markdown(html, unsafe_allow_html=True)
    if footer:
        st.caption(footer)
