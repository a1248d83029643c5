"""
RSVP Display UI

Flashes the round's items one at a time. A single fragment timer
(`run_every`) drives RsvpTicker.poll(); it only exists while the ticker is
running, so holding or finishing the presentation stops it.
"""

from __future__ import annotations

import time

import streamlit as st

from app.session_controller import finish_presentation
from app.ui.flashcard import render_word_card
from core.presentation import RsvpTicker
from core.trainer_session import TrainerSession


def render_rsvp_display(trainer: TrainerSession) -> None:
    """
    Render the presentation for the current round.
    """
    ticker: RsvpTicker | None = st.session_state.ticker
    items = trainer.presentation_order()
    if ticker is None or not items:
        st.info("No words to present. Check the word list source.")
        return

    run_every = ticker.interval_ms / 1000 if ticker.running else None

    @st.fragment(run_every=run_every)
    def _presentation() -> None:
        if ticker.poll(time.monotonic()):
            finish_presentation()
            st.rerun()

        render_word_card(
            items[ticker.visible_index],
            show_reading=trainer.state.show_reading,
            show_meaning=trainer.state.show_meaning,
            footer=ticker.progress_label(),
        )

    _presentation()

    if ticker.paused:
        st.caption("Paused. Resume to continue from this word.")
        st.button("▶ Resume", on_click=ticker.release, use_container_width=True)
    else:
        st.button("⏸ Hold", on_click=ticker.hold, use_container_width=True, help="Pause on this word")
