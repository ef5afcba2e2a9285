"""
Farm Response DTOs

DTOs for farm-related API responses.
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field

from domain.value_objects import FarmArea
from models import Farm


class FarmResponse(BaseModel):
    """
    Response DTO for farm information.

    This DTO separates the API response from the database model,
    allowing them to evolve independently.
    """

    id: int = Field(description="Farm ID")
    name: str = Field(description="Farm name")
    location: str = Field(description="Farm location")
    area: Optional[float] = Field(None, description="Surface in hectares")
    area_formatted: Optional[str] = Field(None, description="Human-readable area")
    creation_date: date = Field(description="Date the farm was established")

    class Config:
        """Pydantic configuration."""
        from_attributes = True  # Allow creation from ORM models

    @classmethod
    def from_model(cls, farm: Farm) -> "FarmResponse":
        """
        Build a response from a Farm row.

        Args:
            farm: Persisted Farm instance

        Returns:
            FarmResponse with the formatted area filled in
        """
        return cls(
            id=farm.id,
            name=farm.name,
            location=farm.location,
            area=farm.area,
            area_formatted=FarmArea(farm.area).to_human_readable() if farm.area else None,
            creation_date=farm.creation_date,
        )
