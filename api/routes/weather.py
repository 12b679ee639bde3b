"""Weather forecast routes"""

from datetime import date
from fastapi import APIRouter, Query
import logging
from typing import List, Optional

from domain.schemas.weather_schemas import WeatherDay
from services.weather_service import WeatherService

router = APIRouter(prefix="/weather", tags=["Weather"])
logger = logging.getLogger("menugen.api.weather")


@router.get("/forecast", response_model=List[WeatherDay])
def forecast(
    days: int = Query(default=7, description="Forecast days, clamped to 1..14"),
    start_date: Optional[date] = Query(
        default=None, alias="startDate", description="First day (YYYY-MM-DD)"
    ),
):
    """
    Daily forecast for the menu strip.

    Always returns one entry per (clamped) day; a clear-sky stub is used
    when the upstream API is unavailable.

    Example:
    - GET /weather/forecast?days=7&startDate=2025-09-02
    """
    return WeatherService.get_daily_forecast(days, start_date)
