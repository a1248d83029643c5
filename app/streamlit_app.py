"""
RSVP Vocabulary Trainer - Main App

Streamlit UI for the pool-scheduling trainer: words flash one by one,
then must be retyped from memory.
"""

import streamlit as st

from app.router import PAGES
from app.session_controller import get_trainer
from app.state import ensure_session_state
from app.ui import render_setup_form
from core.corpus_repo import LoadError


# ---- Page Setup ----

st.set_page_config(
    page_title="RSVP Vocabulary Trainer",
    page_icon="⚡",
    layout="centered"
)


def main():
    """Main app entry point."""
    ensure_session_state()

    try:
        trainer = get_trainer()
    except LoadError as exc:
        st.error(f"Could not load the word list: {exc}")
        return

    if trainer is None:
        render_setup_form()
        return

    tabs = st.tabs([page.title for page in PAGES])
    for tab, page in zip(tabs, PAGES):
        with tab:
            page.render(trainer)


if __name__ == "__main__":
    main()
