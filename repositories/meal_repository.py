"""
Meal Repository - Data access layer for the meal catalog
"""

import logging
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.exceptions import CatalogUnavailableError
from domain.models import Meal
from repositories.base import BaseRepository, CatalogReader

logger = logging.getLogger("menugen.repositories.meal")


class MealRepository(BaseRepository[Meal], CatalogReader):
    """Repository for meal catalog data access"""

    def __init__(self, db: Session):
        super().__init__(db, Meal)

    def list_all(self) -> List[Meal]:
        """Get every meal ordered by id"""
        return self.db.query(Meal).order_by(Meal.id).all()

    def filter_by(
        self,
        protein: Optional[str] = None,
        cuisine: Optional[str] = None,
        cook_time: Optional[str] = None,
        cook_method: Optional[str] = None,
    ) -> List[Meal]:
        """Exact-match filtering on any combination of fields, ordered by name"""
        query = self.db.query(Meal)
        if protein is not None:
            query = query.filter(Meal.protein == protein)
        if cuisine is not None:
            query = query.filter(Meal.cuisine == cuisine)
        if cook_time is not None:
            query = query.filter(Meal.cook_time == cook_time)
        if cook_method is not None:
            query = query.filter(Meal.cook_method == cook_method)
        return query.order_by(Meal.name, Meal.id).all()

    def get_trimmed_proteins(self) -> List[str]:
        """Distinct trimmed, non-blank protein labels, sorted"""
        trimmed = func.trim(Meal.protein)
        rows = (
            self.db.query(trimmed)
            .filter(Meal.protein.isnot(None), trimmed != "")
            .distinct()
            .order_by(trimmed)
            .all()
        )
        return [r[0] for r in rows]

    def count(self) -> int:
        """Number of meals in the catalog"""
        return self.db.query(func.count(Meal.id)).scalar() or 0

    # ---------------------- CatalogReader ----------------------

    def fetch_all(self) -> List[Meal]:
        try:
            return self.list_all()
        except SQLAlchemyError as e:
            logger.error(f"Catalog read failed (fetch_all): {e}")
            raise CatalogUnavailableError(f"Meal catalog unavailable: {e}") from e

    def fetch_by_protein_exact(self, protein: str) -> List[Meal]:
        try:
            meals = self.db.query(Meal).filter(Meal.protein == protein).all()
        except SQLAlchemyError as e:
            logger.error(f"Catalog read failed (protein={protein!r}): {e}")
            raise CatalogUnavailableError(f"Meal catalog unavailable: {e}") from e
        logger.debug(f"Found {len(meals)} meals for exact protein match {protein!r}")
        return meals

    def fetch_distinct_proteins(self) -> List[str]:
        try:
            rows = (
                self.db.query(Meal.protein)
                .filter(Meal.protein.isnot(None))
                .distinct()
                .all()
            )
        except SQLAlchemyError as e:
            logger.error(f"Catalog read failed (distinct proteins): {e}")
            raise CatalogUnavailableError(f"Meal catalog unavailable: {e}") from e
        return [r[0] for r in rows]
