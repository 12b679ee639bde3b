from typing import Optional, List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class MealBase(BaseModel):
    """Meal fields as exchanged with the web client (camelCase on the wire)"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: Optional[str] = Field(None, max_length=255, description="Display name")
    protein: Optional[str] = Field(
        None,
        max_length=100,
        description="Protein category, matched exactly by menu quotas",
    )
    cuisine: Optional[str] = Field(None, max_length=100)
    cook_time: Optional[str] = Field(None, max_length=50, description="e.g. '30 min'")
    cook_method: Optional[str] = Field(None, max_length=100, description="e.g. 'Grill'")
    source: Optional[str] = Field(None, max_length=255)


class MealCreate(MealBase):
    """Schema for creating or replacing a meal; missing text fields are stored as ''"""


class MealResponse(MealBase):
    """Schema for meal response"""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )

    id: int


class FilterOptionsResponse(BaseModel):
    """Distinct values available for the menu builder"""

    proteins: List[str]
    cuisines: List[str] = Field(default_factory=list)
