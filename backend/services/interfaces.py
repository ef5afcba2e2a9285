"""
Service Interfaces

Abstract base classes for the service layer following Dependency Inversion Principle.
The API layer depends on these contracts, never on a concrete service, so tests
can inject a fake.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from dtos.request import FarmRequest
from dtos.response import FarmResponse


class IFarmService(ABC):
    """
    Abstract interface for farm management.

    Not-found is signalled two ways, each explicit: lookups return None, while
    mutations of a missing farm raise FarmNotFoundError.
    """

    @abstractmethod
    def find_all(self) -> List[FarmResponse]:
        """
        List every farm.

        Returns:
            Farms ordered by id (possibly empty)
        """

    @abstractmethod
    def find_by_id(self, farm_id: int) -> Optional[FarmResponse]:
        """
        Look up one farm.

        Args:
            farm_id: Farm ID

        Returns:
            The farm, or None if no farm has that id
        """

    @abstractmethod
    def create(self, dto: FarmRequest) -> FarmResponse:
        """
        Register a new farm.

        Args:
            dto: Validated farm payload

        Returns:
            The persisted farm including its assigned id

        Raises:
            DatabaseError: If the insert fails
        """

    @abstractmethod
    def update(self, farm_id: int, dto: FarmRequest) -> FarmResponse:
        """
        Replace the attributes of an existing farm.

        Raises:
            FarmNotFoundError: If no farm has that id
            DatabaseError: If the update fails
        """

    @abstractmethod
    def delete(self, farm_id: int) -> None:
        """
        Remove a farm.

        Raises:
            FarmNotFoundError: If no farm has that id
            DatabaseError: If the delete fails
        """

    @abstractmethod
    def find_farms_by_criteria(
        self,
        name: Optional[str] = None,
        location: Optional[str] = None
    ) -> List[FarmResponse]:
        """
        Search farms by optional name and location filters.

        Args:
            name: Name substring, None matches any name
            location: Location substring, None matches any location

        Returns:
            Farms satisfying every given filter, ordered by id

        Raises:
            ValidationError: If a filter is malformed
        """
