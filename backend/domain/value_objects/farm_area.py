"""
FarmArea Value Object

Immutable representation of a farm's surface in hectares.
"""

from dataclasses import dataclass
import math

from constants import FarmLimits


@dataclass(frozen=True)
class FarmArea:
    """
    Immutable farm area value object.

    Stored in hectares; provides unit conversion and formatting.
    """

    hectares: float

    def __post_init__(self):
        """Validate farm area."""
        if not math.isfinite(self.hectares):
            raise ValueError(f"Farm area must be a finite number: {self.hectares}")
        if self.hectares <= 0:
            raise ValueError(f"Farm area must be positive: {self.hectares}")

    def to_human_readable(self) -> str:
        """
        Format area for display.

        Returns:
            String like "12.50 ha"
        """
        return f"{self.hectares:.2f} ha"

    def to_square_meters(self) -> float:
        """Convert to square metres."""
        return self.hectares * FarmLimits.SQUARE_METERS_PER_HECTARE

    def to_acres(self) -> float:
        """Convert to acres."""
        return self.hectares * FarmLimits.ACRES_PER_HECTARE

    @classmethod
    def from_square_meters(cls, square_meters: float) -> "FarmArea":
        """Create FarmArea from square metres."""
        return cls(hectares=square_meters / FarmLimits.SQUARE_METERS_PER_HECTARE)

    def __str__(self) -> str:
        return self.to_human_readable()

    def __add__(self, other: "FarmArea") -> "FarmArea":
        """Add two farm areas."""
        if not isinstance(other, FarmArea):
            raise TypeError(f"Cannot add FarmArea and {type(other)}")
        return FarmArea(hectares=self.hectares + other.hectares)

    def __lt__(self, other: "FarmArea") -> bool:
        if not isinstance(other, FarmArea):
            raise TypeError(f"Cannot compare FarmArea and {type(other)}")
        return self.hectares < other.hectares
