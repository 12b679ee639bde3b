from typing import List, Dict, Optional
from sqlalchemy.orm import Session
import logging

from domain.models import Meal
from domain.schemas.meal_schemas import MealCreate
from repositories import MealRepository
from app.exceptions import NotFoundError

logger = logging.getLogger("menugen.meals")

# Query value meaning "do not filter on this field"
FILTER_ALL = "all"

_TEXT_FIELDS = ("name", "protein", "cuisine", "cook_time", "cook_method", "source")


def _safe(value: Optional[str]) -> str:
    return "" if value is None else value


def _filter_value(value: Optional[str]) -> Optional[str]:
    if value is None or value == "" or value == FILTER_ALL:
        return None
    return value


class MealService:
    @staticmethod
    def get_all_meals(db: Session) -> List[Meal]:
        return MealRepository(db).list_all()

    @staticmethod
    def get_meal(db: Session, meal_id: int) -> Meal:
        """
        Get a meal by id.

        Raises:
            NotFoundError: If the meal does not exist
        """
        meal = MealRepository(db).get_by_id(meal_id)
        if meal is None:
            raise NotFoundError(f"Meal not found: {meal_id}")
        return meal

    @staticmethod
    def create_meal(db: Session, data: MealCreate) -> Meal:
        """Insert a meal; missing text fields are stored as empty strings."""
        meal = Meal(**{field: _safe(getattr(data, field)) for field in _TEXT_FIELDS})
        meal = MealRepository(db).create(meal)
        logger.info(f"Created meal {meal.id}: {meal.name!r} ({meal.protein!r})")
        return meal

    @staticmethod
    def update_meal(db: Session, meal_id: int, data: MealCreate) -> Meal:
        """
        Replace every field of an existing meal.

        Raises:
            NotFoundError: If the meal does not exist
        """
        repo = MealRepository(db)
        meal = repo.get_by_id(meal_id)
        if meal is None:
            raise NotFoundError(f"Meal not found: {meal_id}")

        for field in _TEXT_FIELDS:
            setattr(meal, field, _safe(getattr(data, field)))
        meal = repo.update(meal)
        logger.info(f"Updated meal {meal_id}")
        return meal

    @staticmethod
    def delete_meal(db: Session, meal_id: int) -> bool:
        """Delete a meal. Returns False when there was nothing to delete."""
        removed = MealRepository(db).delete(meal_id)
        if removed:
            logger.info(f"Deleted meal {meal_id}")
        else:
            logger.debug(f"Delete requested for missing meal {meal_id}")
        return removed

    @staticmethod
    def filter_meals(
        db: Session,
        protein: Optional[str] = None,
        cuisine: Optional[str] = None,
        cook_time: Optional[str] = None,
        cook_method: Optional[str] = None,
    ) -> List[Meal]:
        """Exact-match filter; None, '' and 'all' leave a field unfiltered."""
        return MealRepository(db).filter_by(
            protein=_filter_value(protein),
            cuisine=_filter_value(cuisine),
            cook_time=_filter_value(cook_time),
            cook_method=_filter_value(cook_method),
        )

    @staticmethod
    def get_filter_options(db: Session) -> Dict[str, List[str]]:
        """Protein options for the menu builder; cuisines stay empty for older clients."""
        proteins = MealRepository(db).get_trimmed_proteins()
        logger.debug(f"Available proteins: {proteins}")
        return {"proteins": proteins, "cuisines": []}
