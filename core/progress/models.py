"""
SQLAlchemy ORM Models for the Progress Store

One row per key holding a whole JSON record (trainer config or progress
state). Records are always replaced as a unit.
"""

from sqlalchemy import JSON, Column, DateTime, String
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class StoredRecord(Base):
    """
    A persisted JSON record addressed by key (e.g. "rsvp_progress").
    """
    __tablename__ = 'stored_records'

    key = Column(String(255), primary_key=True, nullable=False)
    payload = Column(JSON, nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)

    def __repr__(self):
        return f"<StoredRecord({self.key})>"
