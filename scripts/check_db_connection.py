#!/usr/bin/env python3
"""
Check that the meal catalog database is reachable and show a few meals.
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError

from app.config import settings
from domain.models import SessionLocal, Meal
from repositories import MealRepository


def main() -> int:
    url = make_url(settings.database_url)
    print("Testing database connection...")
    print(f"  Host:     {url.host or '-'}:{url.port or '-'}")
    print(f"  Database: {url.database}")
    print(f"  User:     {url.username or '-'}")

    try:
        with SessionLocal() as db:
            count = MealRepository(db).count()
            print("Connection successful!")
            print(f"Found {count} meals in database")

            sample = db.query(Meal).order_by(Meal.id).limit(3).all()
            print("Sample meals:")
            for meal in sample:
                print(f"  - {meal.name} ({meal.protein}, {meal.cuisine})")
    except SQLAlchemyError as e:
        print("Database connection failed:")
        print(f"  Error: {e}")
        print("")
        print("Troubleshooting tips:")
        print("  1. Check DATABASE_URL (host, port, database name)")
        print("  2. Verify the database server is running")
        print("  3. Check username/password and user permissions")
        print("  4. Run scripts/init_db.py to create the meals table")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
