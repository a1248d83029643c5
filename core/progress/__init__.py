"""Progress store: persisted trainer config and scheduler state."""

from core.progress.database import (
    CONFIG_KEY,
    PROGRESS_KEY,
    ProgressStore,
    create_store_engine,
    get_database_url,
    is_test_mode,
)

__all__ = [
    "CONFIG_KEY",
    "PROGRESS_KEY",
    "ProgressStore",
    "create_store_engine",
    "get_database_url",
    "is_test_mode",
]
