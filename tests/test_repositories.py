"""
Repository tests against an in-memory SQLite catalog.

Verifies:
- CatalogReader reads used by menu generation (exact protein match)
- Generic BaseRepository CRUD on Meal
- Driver errors surface as CatalogUnavailableError
"""

from unittest.mock import Mock

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from test_fixtures import db_session, seeded_session
from repositories import MealRepository, CatalogReader
from domain.models import Meal
from app.exceptions import CatalogUnavailableError


def test_meal_repository_is_a_catalog_reader(db_session: Session):
    assert isinstance(MealRepository(db_session), CatalogReader)


def test_fetch_all_returns_every_meal(seeded_session: Session):
    meals = MealRepository(seeded_session).fetch_all()

    assert len(meals) == 12
    assert len({m.id for m in meals}) == 12


def test_fetch_by_protein_exact_is_case_and_space_sensitive(seeded_session: Session):
    seeded_session.add(Meal(name="Chicken Soup", protein="chicken"))
    seeded_session.add(Meal(name="Chicken Wings", protein="Chicken "))
    seeded_session.commit()
    repo = MealRepository(seeded_session)

    assert len(repo.fetch_by_protein_exact("Chicken")) == 4
    assert [m.name for m in repo.fetch_by_protein_exact("chicken")] == ["Chicken Soup"]
    assert [m.name for m in repo.fetch_by_protein_exact("Chicken ")] == ["Chicken Wings"]
    assert repo.fetch_by_protein_exact("Tofu") == []


def test_fetch_distinct_proteins(seeded_session: Session):
    proteins = MealRepository(seeded_session).fetch_distinct_proteins()

    assert sorted(proteins) == ["Beef", "Chicken", "Fish", "Pork", "Vegetarian"]


def test_base_crud(db_session: Session):
    repo = MealRepository(db_session)

    meal = repo.create(Meal(name="Shrimp Scampi", protein="Seafood"))
    assert repo.exists(meal.id)
    assert repo.count() == 1

    meal.cook_method = "Stovetop"
    repo.update(meal)
    assert repo.get_by_id(meal.id).cook_method == "Stovetop"

    assert repo.delete(meal.id) is True
    assert repo.get_by_id(meal.id) is None
    assert repo.delete(meal.id) is False


def test_get_all_paginates(seeded_session: Session):
    repo = MealRepository(seeded_session)

    assert len(repo.get_all(skip=10, limit=5)) == 2


@pytest.mark.parametrize(
    "read",
    [
        lambda repo: repo.fetch_all(),
        lambda repo: repo.fetch_by_protein_exact("Chicken"),
        lambda repo: repo.fetch_distinct_proteins(),
    ],
)
def test_catalog_reads_wrap_database_errors(read):
    db = Mock(spec=Session)
    db.query.side_effect = OperationalError("SELECT", {}, Exception("server closed the connection"))

    with pytest.raises(CatalogUnavailableError) as excinfo:
        read(MealRepository(db))

    assert isinstance(excinfo.value.__cause__, OperationalError)
