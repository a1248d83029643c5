"""
Corpus repository.

Loads the ordered vocabulary corpus from a JSON file (default) or a MongoDB
collection. The corpus is read once per session and addressed only by
position, so the source order is preserved exactly.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Iterable, Optional

from dotenv import load_dotenv
from loguru import logger
from pydantic import ValidationError
from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from core.schemas import CorpusItem

# Load environment
load_dotenv()

# Configuration
DEFAULT_CORPUS_PATH = Path(__file__).parent.parent / "data" / "words.json"
DEFAULT_DB_NAME = "rsvp_trainer"
DEFAULT_COLLECTION_NAME = "words"

# Global connection pool (reused across loads)
_client: Optional[MongoClient] = None


class LoadError(Exception):
    """Corpus source unreachable or malformed."""


# ---- Source Selection ----

def get_corpus_source() -> str:
    """Corpus source from CORPUS_SOURCE ("file" or "mongo")."""
    return os.getenv("CORPUS_SOURCE", "file").lower()


def get_corpus_path() -> Path:
    """Corpus JSON path from CORPUS_PATH (defaults to data/words.json)."""
    return Path(os.getenv("CORPUS_PATH", str(DEFAULT_CORPUS_PATH)))


def load_corpus() -> list[CorpusItem]:
    """
    Load the corpus from the configured source.

    Returns:
        Ordered list of corpus items (possibly empty)

    Raises:
        LoadError: if the source is unreachable or malformed
    """
    source = get_corpus_source()
    if source == "mongo":
        return load_corpus_from_mongo()
    if source == "file":
        return load_corpus_from_file(get_corpus_path())
    raise LoadError(f"Unknown CORPUS_SOURCE: {source!r}")


# ---- JSON File ----

def load_corpus_from_file(path: Path) -> list[CorpusItem]:
    """
    Load a corpus from a JSON array of records.
    """
    try:
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
    except OSError as exc:
        raise LoadError(f"Cannot read corpus file {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise LoadError(f"Corpus file {path} is not valid JSON: {exc}") from exc

    corpus = parse_corpus(raw)
    logger.info("Loaded {} corpus items from {}", len(corpus), path)
    return corpus


# ---- MongoDB ----

def get_collection() -> Collection:
    """
    Get the MongoDB corpus collection.

    Uses a persistent client that is reused across loads.

    Returns:
        MongoDB collection object
    """
    global _client

    mongo_uri = os.getenv("MONGO_URI")
    if not mongo_uri:
        raise LoadError("MONGO_URI not found in environment variables")

    if _client is None:
        _client = MongoClient(
            mongo_uri,
            maxPoolSize=10,
            minPoolSize=1,
            serverSelectionTimeoutMS=5000
        )
    db = _client[os.getenv("CORPUS_DB", DEFAULT_DB_NAME)]
    return db[os.getenv("CORPUS_COLLECTION", DEFAULT_COLLECTION_NAME)]


def load_corpus_from_mongo() -> list[CorpusItem]:
    """
    Load a corpus from MongoDB, ordered by `position` then insertion order.
    """
    try:
        collection = get_collection()
        documents = list(collection.find({}, {"_id": 0}).sort([("position", 1), ("_id", 1)]))
    except PyMongoError as exc:
        raise LoadError(f"Cannot read corpus from MongoDB: {exc}") from exc

    corpus = parse_corpus(documents)
    logger.info("Loaded {} corpus items from MongoDB", len(corpus))
    return corpus


# ---- Parsing ----

def parse_corpus(raw: object) -> list[CorpusItem]:
    """
    Validate raw records into corpus items.

    Raises:
        LoadError: if raw is not a list of valid records
    """
    if not isinstance(raw, list):
        raise LoadError(f"Corpus must be a JSON array, got {type(raw).__name__}")
    try:
        return [CorpusItem.model_validate(record) for record in raw]
    except ValidationError as exc:
        raise LoadError(f"Malformed corpus record: {exc}") from exc


def items_for_indices(corpus: list[CorpusItem], indices: Iterable[int]) -> list[CorpusItem]:
    """
    Materialize corpus items for indices, skipping any out of range.

    Args:
        corpus: Loaded corpus
        indices: Corpus positions

    Returns:
        Items in the order of indices
    """
    items = []
    skipped = 0
    for index in indices:
        if 0 <= index < len(corpus):
            items.append(corpus[index])
        else:
            skipped += 1
    if skipped:
        logger.warning("Skipped {} indices beyond corpus size {}", skipped, len(corpus))
    return items
