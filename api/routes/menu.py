"""Menu generation routes"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
import logging
from typing import List

from domain.models import get_db_session
from domain.schemas.meal_schemas import MealResponse
from domain.schemas.menu_schemas import MenuGenerateRequest
from repositories import MealRepository
from services.menu_service import MenuService

router = APIRouter(prefix="/menu", tags=["Menu"])
logger = logging.getLogger("menugen.api.menu")


@router.post("/generate", response_model=List[MealResponse])
def generate_menu(request: MenuGenerateRequest, db: Session = Depends(get_db_session)):
    """
    Generate a menu of distinct meals.

    Positive protein counts may add up to at most 7. Remaining days are
    filled with random meals; a small catalog yields a shorter menu.

    Example:
    POST /menu/generate
    {"proteinDistribution": {"Chicken": 2, "Beef": 1}, "days": 7}

    Errors:
    - 400 QUOTA_EXCEEDED when the protein counts add up to more than 7
    - 400 INVALID_DAYS when days < 1
    """
    logger.info(
        f"Menu request: proteinDistribution={request.protein_distribution}, "
        f"days={request.days}"
    )
    menu = MenuService.generate_menu(
        MealRepository(db), request.protein_distribution, request.days
    )
    return [MealResponse.model_validate(m) for m in menu]
