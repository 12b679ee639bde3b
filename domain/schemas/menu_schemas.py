from datetime import date
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class MenuGenerateRequest(BaseModel):
    """Menu generation request, e.g. {"proteinDistribution": {"Chicken": 2}, "days": 7}"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    protein_distribution: Optional[Dict[str, Optional[int]]] = Field(
        None, description="Requested meal count per protein label"
    )
    days: Optional[int] = Field(
        None, description="Number of menu days; the configured default when omitted"
    )
    # Used by the client for display only
    start_date: Optional[date] = None
