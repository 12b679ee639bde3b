#!/usr/bin/env python3
"""
Initialize the meal catalog database.
Creates tables and optionally seeds the sample catalog from data/sample_meals.json
"""

import sys
import json
import logging
import argparse
from pathlib import Path

# Add parent directory to path to import app modules
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sqlalchemy import inspect

from domain.models import engine, init_database, SessionLocal, Meal
from repositories import MealRepository

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger("init_db")

SAMPLE_MEALS = project_root / "data" / "sample_meals.json"


def create_tables() -> None:
    init_database()
    tables = inspect(engine).get_table_names()
    logger.info(f"Created {len(tables)} tables: {', '.join(tables)}")


def seed_meals(path: Path) -> int:
    """Insert sample meals when the catalog is empty. Returns rows inserted."""
    with SessionLocal() as db:
        repo = MealRepository(db)
        existing = repo.count()
        if existing:
            logger.info(f"Catalog already has {existing} meals; skipping seed")
            return 0

        rows = json.loads(path.read_text(encoding="utf-8"))
        for row in rows:
            db.add(Meal(**row))
        db.commit()
        logger.info(f"Seeded {len(rows)} meals from {path.name}")
        return len(rows)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Initialize the MenuGen database")
    parser.add_argument(
        "--seed", action="store_true", help="Insert sample meals into an empty catalog"
    )
    parser.add_argument(
        "--seed-file", type=Path, default=SAMPLE_MEALS, help="JSON list of meals"
    )
    args = parser.parse_args(argv)

    try:
        create_tables()
        if args.seed:
            seed_meals(args.seed_file)
    except Exception as e:
        logger.error(f"Database initialization failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
