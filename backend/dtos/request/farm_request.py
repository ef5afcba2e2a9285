"""
Farm Request DTOs

DTOs for farm-related API requests.
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from constants import FarmLimits


class FarmRequest(BaseModel):
    """
    Request DTO for creating or replacing a farm.

    Used as the body of both POST and PUT; an update replaces every
    mutable field.
    """

    name: str = Field(max_length=FarmLimits.NAME_MAX_LENGTH, description="Farm name")
    location: str = Field(max_length=FarmLimits.LOCATION_MAX_LENGTH, description="Farm location")
    area: Optional[float] = Field(None, gt=0, allow_inf_nan=False, description="Surface in hectares")
    creation_date: Optional[date] = Field(None, description="Date the farm was established (defaults to today)")

    @field_validator("name", "location")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Strip surrounding whitespace and reject blank values."""
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v

    @field_validator("creation_date")
    @classmethod
    def validate_creation_date(cls, v: Optional[date]) -> Optional[date]:
        """Ensure the creation date is not in the future."""
        if v is not None and v > date.today():
            raise ValueError("creation date cannot be in the future")
        return v

    class Config:
        """Pydantic configuration."""
        json_schema_extra = {
            "example": {
                "name": "Sunrise",
                "location": "Valencia",
                "area": 12.5,
                "creation_date": "2021-03-15"
            }
        }


class FarmSearchRequest(BaseModel):
    """
    Request DTO for criteria search.

    Both filters are optional; a blank filter is the same as no filter.
    """

    name: Optional[str] = Field(None, max_length=FarmLimits.NAME_MAX_LENGTH, description="Name contains (case-insensitive)")
    location: Optional[str] = Field(None, max_length=FarmLimits.LOCATION_MAX_LENGTH, description="Location contains (case-insensitive)")

    @field_validator("name", "location")
    @classmethod
    def blank_to_none(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        v = v.strip()
        return v or None

    def is_empty(self) -> bool:
        """True when no filter is set."""
        return self.name is None and self.location is None
