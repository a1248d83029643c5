"""
Recall Form UI

Free-text entry of every word remembered from the presentation, one per
line, in any order.
"""

from __future__ import annotations

import streamlit as st

from app.session_controller import submit_recall
from core.grading import split_lines
from core.trainer_session import TrainerSession


def render_recall_form(trainer: TrainerSession) -> None:
    """
    Render the recall text area and submit button.
    """
    target_count = len(trainer.active_items())
    st.markdown(f"**Retype {target_count} words** (order doesn't matter)")

    # Fresh widget key per round so the text area starts empty
    text_key = f"recall_text_{st.session_state.recall_round}"
    with st.form(key=f"recall_form_{st.session_state.recall_round}"):
        text = st.text_area(
            "Type one word per line (kanji or kana)",
            key=text_key,
            height=320,
            placeholder="word_1\nword_2\n...",
        )
        submitted = st.form_submit_button("✔ Submit", use_container_width=True, type="primary")

    st.caption(f"Words entered: {len(split_lines(st.session_state.get(text_key, '')))}")

    if submitted:
        submit_recall(text)
        st.rerun()
