"""
Studied Words UI

Lists every studied word with reading, meaning, part of speech and, when
the corpus ships one, a pronunciation clip.
"""

from __future__ import annotations

import streamlit as st

from app.ui.flashcard import render_word_card
from app.ui.flashcard_style import STUDIED_STYLE
from core.audio import ClipCache
from core.trainer_session import TrainerSession


def render_studied_list(trainer: TrainerSession) -> None:
    """
    Render the studied words (studied order).
    """
    studied = trainer.studied_items()
    st.markdown(f"### Studied Words ({len(studied)})")
    if not studied:
        st.info("No studied words yet.")
        return

    clip_cache: ClipCache = st.session_state.clip_cache
    for index, item in studied:
        render_word_card(item, footer=item.part_of_speech, style=STUDIED_STYLE)
        clip = clip_cache.get(index, item)
        if clip is not None:
            st.audio(clip.data, format=clip.mime)
