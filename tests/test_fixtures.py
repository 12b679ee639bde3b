"""
Shared test fixtures and utilities for the MenuGen test suite.

This module contains common mock objects, helper functions, and test client setup
that are reused across multiple test files to ensure consistency and reduce duplication.
"""

from types import SimpleNamespace
from typing import Generator, Iterable, List

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from main import app
from domain.models import Base, Meal, get_db_session
from repositories.base import CatalogReader

client = TestClient(app)


# Realistic catalog: 4 chicken, 3 beef, 2 pork, 2 fish, 1 vegetarian
REALISTIC_MEALS = [
    ("Lemon Herb Roast Chicken", "Chicken", "American"),
    ("Chicken Tikka Masala", "Chicken", "Indian"),
    ("Chicken Fajitas", "Chicken", "Mexican"),
    ("Grilled Chicken Caesar", "Chicken", "American"),
    ("Beef Bulgogi", "Beef", "Korean"),
    ("Slow Cooker Chili", "Beef", "American"),
    ("Smash Burgers", "Beef", "American"),
    ("Pork Carnitas Tacos", "Pork", "Mexican"),
    ("Pork Chops with Apples", "Pork", "American"),
    ("Miso Glazed Salmon", "Fish", "Japanese"),
    ("Fish Tacos", "Fish", "Mexican"),
    ("Mushroom Risotto", "Vegetarian", "Italian"),
]


def make_meal(
    meal_id=1,
    name="Chicken Fajitas",
    protein="Chicken",
    cuisine="Mexican",
    cook_time="30 min",
    cook_method="Skillet",
    source="Family",
):
    """
    Create a mock meal object shaped like the ORM row.

    Example:
        >>> meal = make_meal(7, "Beef Bulgogi", "Beef")
        >>> meal.protein
        'Beef'
    """
    return SimpleNamespace(
        id=meal_id,
        name=name,
        protein=protein,
        cuisine=cuisine,
        cook_time=cook_time,
        cook_method=cook_method,
        source=source,
    )


def make_catalog_meals() -> List[SimpleNamespace]:
    """The realistic catalog as mock meals with ids 1..12"""
    return [
        make_meal(i, name, protein, cuisine)
        for i, (name, protein, cuisine) in enumerate(REALISTIC_MEALS, start=1)
    ]


class FakeCatalog(CatalogReader):
    """In-memory catalog that records every read"""

    def __init__(self, meals: Iterable):
        self.meals = list(meals)
        self.calls = []

    def fetch_all(self):
        self.calls.append(("fetch_all",))
        return list(self.meals)

    def fetch_by_protein_exact(self, protein):
        self.calls.append(("fetch_by_protein_exact", protein))
        return [m for m in self.meals if m.protein == protein]

    def fetch_distinct_proteins(self):
        self.calls.append(("fetch_distinct_proteins",))
        return sorted({m.protein for m in self.meals if m.protein is not None})


# =============================================================================
# DATABASE SESSION FIXTURE FOR INTEGRATION TESTS
# =============================================================================


@pytest.fixture(scope="function")
def db_session() -> Generator[Session, None, None]:
    """
    Fresh in-memory SQLite catalog per test.

    StaticPool keeps a single connection so the TestClient worker thread
    sees the same database as the test body.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    session = SessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()
        Base.metadata.drop_all(engine)
        engine.dispose()


@pytest.fixture(scope="function")
def seeded_session(db_session: Session) -> Session:
    """db_session preloaded with the realistic catalog"""
    for name, protein, cuisine in REALISTIC_MEALS:
        db_session.add(
            Meal(
                name=name,
                protein=protein,
                cuisine=cuisine,
                cook_time="30 min",
                cook_method="Stovetop",
                source="Family",
            )
        )
    db_session.commit()
    return db_session


@pytest.fixture(scope="function")
def api_db(seeded_session: Session):
    """Route the API's DB dependency to the seeded SQLite session"""
    app.dependency_overrides[get_db_session] = lambda: seeded_session
    try:
        yield seeded_session
    finally:
        app.dependency_overrides.pop(get_db_session, None)
