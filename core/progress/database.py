"""
Database - Progress Store I/O

Key/value persistence of JSON-shaped records (trainer config and progress
state) using SQLAlchemy. SQLite by default; any SQLAlchemy URL works.

This module handles ONLY database I/O.
Scheduling logic lives in core.pool.
"""

from __future__ import annotations

import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv
from loguru import logger
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from core.progress.models import Base, StoredRecord

# Load environment
load_dotenv()

DB_DIR = Path(__file__).parent.parent.parent / "logs"

CONFIG_KEY = "rsvp_config"
PROGRESS_KEY = "rsvp_progress"


# ---- Configuration ----

def is_test_mode() -> bool:
    """Check if running in test mode."""
    return os.getenv("TEST_MODE", "false").lower() == "true"


def get_database_url() -> str:
    """
    Get the database URL from environment variables.

    DATABASE_URL overrides the default SQLite file under logs/. In test mode
    the database name gets a `test_` prefix.

    Returns:
        SQLAlchemy database URL
    """
    base_url = os.getenv("DATABASE_URL")
    if not base_url:
        db_name = "test_trainer.db" if is_test_mode() else "trainer.db"
        return f"sqlite:///{DB_DIR / db_name}"

    if is_test_mode():
        return base_url.replace("trainer", "test_trainer")
    return base_url


def create_store_engine(url: Optional[str] = None) -> Engine:
    """
    Create an engine and make sure the schema exists.

    Safe to call multiple times - only creates tables if they don't exist.
    """
    url = url or get_database_url()
    if url.startswith("sqlite:///"):
        Path(url.removeprefix("sqlite:///")).parent.mkdir(parents=True, exist_ok=True)
    engine = create_engine(url, pool_pre_ping=True, echo=False)
    Base.metadata.create_all(engine)
    return engine


# ---- Store ----

class ProgressStore:
    """
    Read/write/delete whole JSON records by key.

    Every write replaces the record in a single transaction, so a reader
    never sees a half-updated state.
    """

    def __init__(self, engine: Optional[Engine] = None):
        self.engine = engine or create_store_engine()
        self._session_factory = sessionmaker(bind=self.engine, expire_on_commit=False)

    def _session(self) -> Session:
        return self._session_factory()

    def read(self, key: str) -> Optional[dict[str, Any]]:
        """
        Load a record.

        Returns:
            The stored dict, or None if the key is absent
        """
        with self._session() as session:
            row = session.get(StoredRecord, key)
            if row is None:
                return None
            return row.payload

    def write(self, key: str, record: dict[str, Any]) -> None:
        """
        Insert or replace a record.
        """
        now = datetime.now(timezone.utc)
        with self._session() as session, session.begin():
            row = session.get(StoredRecord, key)
            if row is None:
                session.add(StoredRecord(key=key, payload=record, updated_at=now))
            else:
                row.payload = record
                row.updated_at = now

    def delete(self, key: str) -> None:
        """
        Remove a record if present.
        """
        with self._session() as session, session.begin():
            row = session.get(StoredRecord, key)
            if row is not None:
                session.delete(row)
                logger.info("Deleted stored record {}", key)

    def dispose(self) -> None:
        self.engine.dispose()
