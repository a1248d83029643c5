"""
Study page rendering.
"""

from __future__ import annotations

import streamlit as st

from app.ui import (
    render_recall_form,
    render_result_panel,
    render_rsvp_display,
    render_session_stats,
)
from core.progress import is_test_mode
from core.trainer_session import Phase, TrainerSession


def render_study_page(trainer: TrainerSession) -> None:
    """
    Render the current round (presentation, recall or result).
    """
    render_session_stats(trainer)

    if trainer.phase == Phase.PRESENT:
        render_rsvp_display(trainer)
    elif trainer.phase == Phase.RECALL:
        render_recall_form(trainer)
    elif trainer.last_result is not None:
        render_result_panel(trainer.last_result)

    if is_test_mode():
        st.caption("TEST MODE - Using test_trainer database")
