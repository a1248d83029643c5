"""
Simple page router for Streamlit tabs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from app.pages.study import render_study_page
from app.pages.studied import render_studied_page
from core.trainer_session import TrainerSession


@dataclass(frozen=True)
class AppPage:
    title: str
    render: Callable[[TrainerSession], None]


PAGES = [
    AppPage(title="Train", render=render_study_page),
    AppPage(title="Studied", render=render_studied_page),
]
