"""
Session Header UI

Renders trainer metrics (studied, speed, round) and controls
(display toggles, replay, reset).
"""

import streamlit as st

from app.session_controller import replay, reset_trainer, set_display
from core.trainer_session import TrainerSession


def render_session_stats(trainer: TrainerSession) -> None:
    """
    Render metrics and controls above the round.
    """
    col1, col2, col3, col4 = st.columns([2, 2, 2, 2])

    with col1:
        st.metric("Studied", trainer.studied_count)

    with col2:
        st.metric("Speed", f"{trainer.config.speed_ms}ms")

    with col3:
        st.metric("Round", trainer.round)

    with col4:
        with st.popover("👁", help="Visibility options"):
            hide_reading = st.checkbox("Hide reading", value=not trainer.state.show_reading)
            hide_meaning = st.checkbox("Hide meaning", value=not trainer.state.show_meaning)
            if hide_reading == trainer.state.show_reading or hide_meaning == trainer.state.show_meaning:
                set_display(show_reading=not hide_reading, show_meaning=not hide_meaning)
                st.rerun()
        if trainer.can_replay:
            st.button("🔁", on_click=replay, help="Replay presentation")
        if st.button("↺", help="Reset settings and progress"):
            reset_trainer()
            st.rerun()

    st.divider()
