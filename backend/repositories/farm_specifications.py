"""
Farm-specific Specifications

Concrete specifications for querying farms. Text criteria match
case-insensitively on a substring, e.g. "val" matches "Valencia".
"""

from typing import Optional

from sqlalchemy import func

from models import Farm
from .specifications import Specification, MatchAllSpecification


def _escape_like(value: str) -> str:
    """Escape LIKE wildcards so user input is matched literally."""
    return value.replace('\\', '\\\\').replace('%', '\\%').replace('_', '\\_')


class _FarmTextContainsSpec(Specification[Farm]):
    """Case-insensitive 'contains' on a text column of Farm."""

    attribute: str = ""

    def __init__(self, value: str):
        self.value = value

    def is_satisfied_by(self, farm: Farm) -> bool:
        field_value = getattr(farm, self.attribute) or ""
        return self.value.lower() in field_value.lower()

    def to_sql_filter(self):
        column = getattr(Farm, self.attribute)
        pattern = f"%{_escape_like(self.value.lower())}%"
        return func.lower(column).like(pattern, escape='\\')


class FarmsByNameSpec(_FarmTextContainsSpec):
    """Farms whose name contains the given text."""

    attribute = "name"


class FarmsByLocationSpec(_FarmTextContainsSpec):
    """Farms whose location contains the given text."""

    attribute = "location"


def farm_criteria(name: Optional[str] = None, location: Optional[str] = None) -> Specification[Farm]:
    """
    Compose the search criteria for the farm search endpoint.

    Absent filters match any farm; present filters must all hold.

    Args:
        name: Substring the name must contain, or None
        location: Substring the location must contain, or None

    Returns:
        Combined specification (MatchAll when no filter is given)
    """
    spec: Specification[Farm] = MatchAllSpecification()
    if name:
        spec = spec & FarmsByNameSpec(name)
    if location:
        spec = spec & FarmsByLocationSpec(location)
    return spec
