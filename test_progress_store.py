"""
Tests for the SQLAlchemy-backed progress store.
"""

import pytest

from core.progress import ProgressStore, create_store_engine, get_database_url


@pytest.fixture
def sqlite_url(tmp_path):
    return f"sqlite:///{tmp_path / 'store' / 'trainer.db'}"


@pytest.fixture
def progress_store(sqlite_url):
    store = ProgressStore(create_store_engine(sqlite_url))
    yield store
    store.dispose()


def test_read_missing_key(progress_store):
    assert progress_store.read("rsvp_progress") is None


def test_write_then_read(progress_store):
    record = {"version": 2, "studiedIndices": [3, 1, 2], "showReading": False}
    progress_store.write("rsvp_progress", record)
    assert progress_store.read("rsvp_progress") == record


def test_write_replaces_whole_record(progress_store):
    progress_store.write("rsvp_progress", {"round": 1, "groups": [[1, 2]]})
    progress_store.write("rsvp_progress", {"round": 2})
    assert progress_store.read("rsvp_progress") == {"round": 2}


def test_delete(progress_store):
    progress_store.write("rsvp_config", {"initialCount": 5})
    progress_store.delete("rsvp_config")
    progress_store.delete("rsvp_config")
    assert progress_store.read("rsvp_config") is None


def test_records_survive_a_new_engine(sqlite_url):
    first = ProgressStore(create_store_engine(sqlite_url))
    first.write("rsvp_config", {"speedMs": 400})
    first.dispose()

    second = ProgressStore(create_store_engine(sqlite_url))
    assert second.read("rsvp_config") == {"speedMs": 400}
    second.dispose()


def test_database_url_defaults_to_sqlite(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.setenv("TEST_MODE", "false")
    url = get_database_url()
    assert url.startswith("sqlite:///")
    assert url.endswith("trainer.db")
    assert "test_trainer" not in url


def test_database_url_in_test_mode(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.setenv("TEST_MODE", "true")
    assert get_database_url().endswith("test_trainer.db")

    monkeypatch.setenv("DATABASE_URL", "postgresql://user@localhost/trainer")
    assert get_database_url() == "postgresql://user@localhost/test_trainer"
