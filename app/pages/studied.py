"""
Studied words page rendering.
"""

from __future__ import annotations

from app.ui import render_studied_list
from core.trainer_session import TrainerSession


def render_studied_page(trainer: TrainerSession) -> None:
    render_studied_list(trainer)
