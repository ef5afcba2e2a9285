"""
Farm repository for farm-specific data access operations.
"""

from typing import List, Optional
from sqlalchemy.orm import Session

from models import Farm
from .base_repository import BaseRepository
from .farm_specifications import farm_criteria


class FarmRepository(BaseRepository[Farm]):
    """Repository for Farm model operations."""

    def __init__(self, db: Session):
        super().__init__(db, Farm)

    def search(self, name: Optional[str] = None, location: Optional[str] = None) -> List[Farm]:
        """
        Find farms by optional name and location filters.

        Args:
            name: Name substring (case-insensitive), None for any
            location: Location substring (case-insensitive), None for any

        Returns:
            Matching farms ordered by id
        """
        return self.find(farm_criteria(name=name, location=location))
