"""
Round Result UI

Shows the pass/fail verdict with missing words and unmatched answers.
"""

from __future__ import annotations

import streamlit as st

from app.session_controller import continue_round
from core.grading import RecallResult


def _render_chips(label: str, words: list[str]) -> None:
    st.markdown(f"**{label}**")
    st.markdown(" ".join(f"`{word}`" for word in words))


def render_result_panel(result: RecallResult) -> None:
    """
    Render the result of the last recall and the continue/retry button.
    """
    if result.passed:
        st.success("🎉 Great job! All words recalled.")
    else:
        st.error("No worries, try again.")

    if not result.passed and result.missing:
        _render_chips("Missing:", result.missing)
    if result.extras:
        _render_chips("Not in the list:", result.extras)

    label = "Continue" if result.passed else "Retry"
    st.button(label, on_click=continue_round, type="primary", use_container_width=True)
