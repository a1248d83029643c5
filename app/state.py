"""
Streamlit session state and resource initialization helpers.
"""

from __future__ import annotations

import streamlit as st

from core.audio import ClipCache
from core.corpus_repo import load_corpus
from core.progress import ProgressStore
from core.schemas import CorpusItem


@st.cache_resource
def get_store() -> ProgressStore:
    """
    Progress store shared by all reruns (engine created once).
    """
    return ProgressStore()


@st.cache_resource(show_spinner="Loading words...")
def get_corpus() -> list[CorpusItem]:
    """
    Corpus loaded once per server process.

    Raises:
        LoadError: propagated so the page can show it; not cached on failure
    """
    return load_corpus()


def ensure_session_state() -> None:
    """
    Populate Streamlit session_state with defaults.
    """
    if "trainer" not in st.session_state:
        st.session_state.trainer = None
    if "ticker" not in st.session_state:
        st.session_state.ticker = None
    if "clip_cache" not in st.session_state:
        st.session_state.clip_cache = ClipCache()
    if "recall_round" not in st.session_state:
        st.session_state.recall_round = 0
