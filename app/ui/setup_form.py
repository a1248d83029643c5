"""
Setup Form UI

Initial trainer settings. Settings are locked during practice; changing
them requires a reset.
"""

from __future__ import annotations

import streamlit as st
from pydantic import ValidationError

from app.session_controller import save_setup
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


def render_setup_form() -> None:
    """
    Render the setup form and save settings on submit.
    """
    st.title("Initial setup")
    st.caption("Settings are locked during practice. To change them, use Reset.")

    with st.form(key="setup_form"):
        initial_count = st.number_input(
            f"Initial word count ({MIN_INITIAL_COUNT}-{MAX_INITIAL_COUNT})",
            min_value=MIN_INITIAL_COUNT,
            max_value=MAX_INITIAL_COUNT,
            value=DEFAULT_INITIAL_COUNT,
        )
        speed_ms = st.number_input(
            "Transition speed (ms)",
            min_value=MIN_SPEED_MS,
            value=DEFAULT_SPEED_MS,
            step=50,
        )
        increment = st.number_input(
            "Words to add on each pass",
            min_value=MIN_INCREMENT,
            max_value=MAX_INCREMENT,
            value=DEFAULT_INCREMENT,
        )
        submitted = st.form_submit_button("▶ Start", type="primary", use_container_width=True)

    if submitted:
        try:
            save_setup(int(initial_count), int(speed_ms), int(increment))
        except ValidationError as exc:
            st.error(f"Invalid settings: {exc}")
            return
        st.rerun()
