#!/usr/bin/env python3
"""
Database initialization script.
Creates all tables and loads tour packages and tours from a JSON seed file.

Usage:
    python -m tour_ratings.cli.init_db [--seed PATH] [--drop] [--no-seed]
"""
import argparse
import json
import sys
from pathlib import Path
from typing import Optional, Sequence, Tuple
import logging

from sqlalchemy.orm import Session

from tour_ratings import crud
from tour_ratings.core.config import settings
from tour_ratings.core.database import init_db, drop_db, get_db_context
from tour_ratings.core.models import Difficulty, Region
from tour_ratings.utils.logger import setup_logging

logger = logging.getLogger(__name__)

DEFAULT_SEED_FILE = Path(__file__).resolve().parent.parent / "data" / "tours.json"


def load_seed_data(db: Session, seed_path: Path) -> Tuple[int, int]:
    """
    Load tour packages and tours from a seed file.

    Packages whose code already exists are skipped. Tours are only loaded
    into an empty tours table, so running the script twice is harmless.

    Returns:
        (packages created, tours created)
    """
    with open(seed_path, "r", encoding="utf-8") as f:
        data = json.load(f)

    packages_created = 0
    for entry in data.get("tourPackages", []):
        if crud.get_tour_package(db, entry["code"]):
            continue
        crud.create_tour_package(db, code=entry["code"], name=entry["name"])
        packages_created += 1

    if crud.count_tours(db) > 0:
        logger.info("Tours already loaded, skipping tour seed")
        return packages_created, 0

    tours_created = 0
    for entry in data.get("tours", []):
        package_code = entry["packageType"]
        if not crud.get_tour_package(db, package_code):
            raise ValueError(f"Tour package does not exist {package_code}")

        crud.create_tour(
            db,
            title=entry["title"],
            tour_package_code=package_code,
            description=entry.get("description"),
            blurb=entry.get("blurb"),
            price=entry.get("price"),
            duration=entry.get("length"),
            bullets=entry.get("bullets"),
            keywords=entry.get("keywords"),
            difficulty=Difficulty(entry["difficulty"]) if entry.get("difficulty") else None,
            region=Region(entry["region"]) if entry.get("region") else None
        )
        tours_created += 1

    return packages_created, tours_created


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Initialize database."""
    parser = argparse.ArgumentParser(description="Create the tour ratings tables and load seed data.")
    parser.add_argument("--seed", type=Path, default=None,
                        help="JSON seed file (default: SEED_FILE or the bundled tours.json)")
    parser.add_argument("--drop", action="store_true", help="Drop all tables first")
    parser.add_argument("--no-seed", action="store_true", help="Only create the tables")
    args = parser.parse_args(argv)

    setup_logging()

    seed_path = args.seed or (Path(settings.seed_file) if settings.seed_file else DEFAULT_SEED_FILE)

    try:
        if args.drop:
            drop_db()

        # Create all tables
        init_db()

        if not args.no_seed:
            logger.info(f"Loading seed data from {seed_path}")
            with get_db_context() as db:
                packages, tours = load_seed_data(db, seed_path)
            logger.info(f"Seed complete: {packages} tour packages, {tours} tours")
            print(f"Loaded {packages} tour packages and {tours} tours")

        logger.info("Database initialization completed successfully!")
        print("\nDatabase initialized successfully!")
        return 0

    except Exception as e:
        logger.error(f"Database initialization failed: {e}")
        print(f"\nERROR: Database initialization failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
