"""
Domain Value Objects

Value objects are immutable types that represent descriptive aspects of the domain.
They have no conceptual identity and are compared by their values, not by ID.

Examples:
- FarmArea: Surface in hectares with conversion and formatting
"""

from .farm_area import FarmArea

__all__ = ["FarmArea"]
