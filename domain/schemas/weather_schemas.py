from datetime import date

from pydantic import BaseModel, ConfigDict, Field


class WeatherDay(BaseModel):
    """One forecast day for the menu strip"""

    model_config = ConfigDict(populate_by_name=True)

    date: date
    temp_f: int = Field(..., alias="tempF", description="Temperature in Fahrenheit")
    condition: str = Field(
        ..., description="Clear, Clouds, Mist, Drizzle, Rain, Snow or Thunderstorm"
    )
    description: str
