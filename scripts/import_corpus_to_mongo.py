"""
Import the JSON word list into MongoDB.

Each record is stored with its list position so the trainer loads the
corpus in the same order (progress refers to words by position).

Usage:
    python -m scripts.import_corpus_to_mongo [--path data/words.json] [--replace] [--dry-run]
"""

from __future__ import annotations

import argparse
from pathlib import Path

from loguru import logger
from pymongo.errors import PyMongoError

from core.corpus_repo import get_collection, get_corpus_path, load_corpus_from_file
from core.schemas import CorpusItem


def corpus_documents(corpus: list[CorpusItem]) -> list[dict]:
    """
    MongoDB documents for a corpus, in the layout load_corpus_from_mongo() reads.
    """
    return [
        {**item.model_dump(by_alias=True, exclude_none=True), "position": position}
        for position, item in enumerate(corpus)
    ]


def import_corpus(path: Path, replace: bool = False, dry_run: bool = False) -> int:
    """
    Upsert every word of a JSON corpus file by position.

    Args:
        path: JSON corpus file
        replace: Delete documents beyond the new corpus length
        dry_run: If True, don't write to MongoDB

    Returns:
        Number of documents written (or that would be written)
    """
    documents = corpus_documents(load_corpus_from_file(path))
    if dry_run:
        logger.info("[DRY RUN] Would import {} words from {}", len(documents), path)
        return len(documents)

    collection = get_collection()
    collection.create_index([("position", 1)], unique=True)

    for document in documents:
        collection.replace_one({"position": document["position"]}, document, upsert=True)

    if replace:
        removed = collection.delete_many({"position": {"$gte": len(documents)}}).deleted_count
        if removed:
            logger.warning("Removed {} words beyond position {}", removed, len(documents) - 1)

    logger.info("Imported {} words into {}", len(documents), collection.full_name)
    return len(documents)


def main():
    parser = argparse.ArgumentParser(description="Import the JSON word list into MongoDB")
    parser.add_argument(
        "--path",
        type=Path,
        default=None,
        help="Corpus JSON file (default: CORPUS_PATH or data/words.json)"
    )
    parser.add_argument(
        "--replace",
        action="store_true",
        help="Delete stored words beyond the imported list"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Don't actually write to MongoDB"
    )

    args = parser.parse_args()

    try:
        import_corpus(args.path or get_corpus_path(), replace=args.replace, dry_run=args.dry_run)
    except PyMongoError as exc:
        logger.error("MongoDB import failed: {}", exc)
        raise SystemExit(1) from exc


if __name__ == "__main__":
    main()
