from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from sqlalchemy.orm import Session

from . import models, settings
from .db import SessionLocal

logger = logging.getLogger(__name__)

# Top-level keys of a seed file and the model each list populates
SEED_SECTIONS = {
    "members": models.Member,
    "posts": models.Post,
    "gallery": models.GalleryImage,
}


def load_seed_data(db: Session, data: dict) -> dict[str, int]:
    """
    Insert members, posts and gallery pictures from a parsed seed document.

    Members and gallery pictures have no write endpoint, so this is how
    they get into the store. Unknown keys in a row raise TypeError.

    Returns:
        Number of rows inserted per section.
    """
    counts: dict[str, int] = {}
    for section, model in SEED_SECTIONS.items():
        rows = data.get(section) or []
        for row in rows:
            db.add(model(**row))
        counts[section] = len(rows)
    db.commit()
    return counts


def load_seed_file(path: str | Path) -> dict[str, int]:
    with open(path, encoding="utf-8") as f:
        data = json.load(f)

    session = SessionLocal()
    try:
        counts = load_seed_data(session, data)
    finally:
        session.close()

    logger.info(f"Seeded from {path}: {counts}")
    return counts


def ensure_seed_data() -> None:
    """Load SEED_FILE into the store when it is configured and no member exists yet."""
    if not settings.SEED_FILE:
        logger.info("ensure_seed_data: SEED_FILE not set, nothing to seed.")
        return

    session = SessionLocal()
    try:
        has_members = session.query(models.Member.id).first() is not None
    finally:
        session.close()

    if has_members:
        logger.info("ensure_seed_data: Store already populated, skipping.")
        return

    load_seed_file(settings.SEED_FILE)


def main() -> None:
    parser = argparse.ArgumentParser(description="Load showcase content from a JSON file")
    parser.add_argument("path", help="JSON file with members, posts and gallery lists")
    args = parser.parse_args()

    logging.basicConfig(level=settings.LOG_LEVEL)
    load_seed_file(args.path)


if __name__ == "__main__":
    main()
