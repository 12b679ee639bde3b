"""Meal catalog routes"""

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session
import logging
from typing import List, Optional

from domain.models import get_db_session
from domain.schemas.meal_schemas import (
    MealCreate,
    MealResponse,
    FilterOptionsResponse,
)
from services.meal_service import MealService

router = APIRouter(tags=["Meals"])
logger = logging.getLogger("menugen.api.meals")


@router.get("/filters", response_model=FilterOptionsResponse)
def get_filters(db: Session = Depends(get_db_session)):
    """Distinct protein labels for the menu builder"""
    return MealService.get_filter_options(db)


@router.get("/meals", response_model=List[MealResponse])
def get_all_meals(db: Session = Depends(get_db_session)):
    """Get every meal in the catalog"""
    meals = MealService.get_all_meals(db)
    return [MealResponse.model_validate(m) for m in meals]


@router.get("/meals/filter", response_model=List[MealResponse])
def filter_meals(
    protein: Optional[str] = Query(None),
    cuisine: Optional[str] = Query(None),
    cook_time: Optional[str] = Query(None, alias="cookTime"),
    cook_method: Optional[str] = Query(None, alias="cookMethod"),
    db: Session = Depends(get_db_session),
):
    """
    Filter meals by exact field values, ordered by name.

    Omit a parameter or pass "all" to leave that field unfiltered.

    Examples:
    - GET /meals/filter?protein=Chicken
    - GET /meals/filter?protein=Beef&cookMethod=Grill
    """
    meals = MealService.filter_meals(db, protein, cuisine, cook_time, cook_method)
    return [MealResponse.model_validate(m) for m in meals]


@router.get("/meals/{meal_id}", response_model=MealResponse)
def get_meal(meal_id: int, db: Session = Depends(get_db_session)):
    """Get a meal by id"""
    return MealResponse.model_validate(MealService.get_meal(db, meal_id))


@router.post("/meals", response_model=MealResponse, status_code=status.HTTP_201_CREATED)
def create_meal(payload: MealCreate, db: Session = Depends(get_db_session)):
    """Add a meal to the catalog"""
    meal = MealService.create_meal(db, payload)
    return MealResponse.model_validate(meal)


@router.put("/meals/{meal_id}", response_model=MealResponse)
def update_meal(meal_id: int, payload: MealCreate, db: Session = Depends(get_db_session)):
    """Replace all fields of a meal"""
    meal = MealService.update_meal(db, meal_id, payload)
    return MealResponse.model_validate(meal)


@router.delete("/meals/{meal_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_meal(meal_id: int, db: Session = Depends(get_db_session)):
    """Delete a meal (no error if it is already gone)"""
    MealService.delete_meal(db, meal_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
