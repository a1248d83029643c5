"""
Session lifecycle helpers for Streamlit app.

Thin glue between widgets and core.trainer_session.TrainerSession; every
callback resolves one user action synchronously.
"""

from __future__ import annotations

import streamlit as st
from loguru import logger

from app.state import get_corpus, get_store
from core.grading import split_lines
from core.presentation import RsvpTicker
from core.progress import CONFIG_KEY, PROGRESS_KEY
from core.schemas import TrainerConfig
from core.trainer_session import TrainerSession, load_config, save_config


def get_trainer() -> TrainerSession | None:
    """
    Current trainer, opened from the store on first use.

    Returns:
        TrainerSession, or None when no settings exist yet (setup needed)
    """
    if st.session_state.trainer is not None:
        return st.session_state.trainer

    store = get_store()
    config = load_config(store)
    if config is None:
        return None

    trainer = TrainerSession.open(store, get_corpus(), config)
    st.session_state.trainer = trainer
    _restart_ticker(trainer)
    return trainer


def save_setup(initial_count: int, speed_ms: int, increment: int) -> None:
    """
    Persist settings from the setup form and open a fresh trainer.
    """
    store = get_store()
    config = TrainerConfig(initial_count=initial_count, speed_ms=speed_ms, increment=increment)
    save_config(store, config)
    st.session_state.trainer = None
    get_trainer()


def finish_presentation() -> None:
    trainer: TrainerSession = st.session_state.trainer
    trainer.finish_presentation()
    st.session_state.ticker = None


def submit_recall(text: str) -> None:
    trainer: TrainerSession = st.session_state.trainer
    trainer.submit_recall(split_lines(text))


def continue_round() -> None:
    """
    Apply the pending outcome and start presenting the next round.
    """
    trainer: TrainerSession = st.session_state.trainer
    trainer.continue_round()
    st.session_state.recall_round += 1
    _restart_ticker(trainer)


def replay() -> None:
    trainer: TrainerSession = st.session_state.trainer
    trainer.replay()
    _restart_ticker(trainer)


def set_display(show_reading: bool | None = None, show_meaning: bool | None = None) -> None:
    trainer: TrainerSession = st.session_state.trainer
    trainer.set_display(show_reading=show_reading, show_meaning=show_meaning)


def reset_trainer() -> None:
    """
    Discard settings and progress; the setup form is shown next.
    """
    trainer: TrainerSession | None = st.session_state.trainer
    if trainer is not None:
        trainer.reset()
    else:
        store = get_store()
        store.delete(PROGRESS_KEY)
        store.delete(CONFIG_KEY)
    st.session_state.trainer = None
    st.session_state.ticker = None
    st.session_state.clip_cache.clear()
    logger.info("Trainer reset from UI")


def _restart_ticker(trainer: TrainerSession) -> None:
    st.session_state.ticker = RsvpTicker(
        item_count=len(trainer.presentation_order()),
        speed_ms=trainer.config.speed_ms,
    )
