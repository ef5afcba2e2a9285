"""
Farm Service

Business logic for farm management: maps request DTOs onto Farm rows, owns
the transaction boundary and translates persistence failures into
application errors.
"""

from datetime import date
from typing import List, Optional
import logging

import pydantic
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from dtos.request import FarmRequest, FarmSearchRequest
from dtos.response import FarmResponse
from exceptions import DatabaseError, FarmNotFoundError, ValidationError
from models import Farm
from repositories.farm_repository import FarmRepository
from services.interfaces import IFarmService
from utils.logging_utils import log_operation

logger = logging.getLogger(__name__)


class FarmService(IFarmService):
    """Service for farm-related business logic."""

    def __init__(self, db: Session, farm_repo: FarmRepository | None = None):
        """
        Initialize FarmService.

        Args:
            db: Database session
            farm_repo: Repository to use (defaults to one bound to db)
        """
        self.db = db
        self.farm_repo = farm_repo or FarmRepository(db)

    def find_all(self) -> List[FarmResponse]:
        farms = self.farm_repo.get_all()
        return [FarmResponse.from_model(farm) for farm in farms]

    def find_by_id(self, farm_id: int) -> Optional[FarmResponse]:
        farm = self.farm_repo.get_by_id(farm_id)
        if farm is None:
            logger.debug(f"Farm {farm_id} not found")
            return None
        return FarmResponse.from_model(farm)

    @log_operation("create_farm")
    def create(self, dto: FarmRequest) -> FarmResponse:
        farm = Farm(
            name=dto.name,
            location=dto.location,
            area=dto.area,
            creation_date=dto.creation_date or date.today(),
        )
        try:
            self.farm_repo.create(farm)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise DatabaseError("create_farm", "Could not create farm") from e

        self.db.refresh(farm)
        logger.info(f"Created farm {farm.id} ({farm.name!r} at {farm.location!r})")
        return FarmResponse.from_model(farm)

    @log_operation("update_farm")
    def update(self, farm_id: int, dto: FarmRequest) -> FarmResponse:
        farm = self._get_or_raise(farm_id)

        farm.name = dto.name
        farm.location = dto.location
        farm.area = dto.area
        if dto.creation_date is not None:
            farm.creation_date = dto.creation_date

        try:
            self.farm_repo.update(farm)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise DatabaseError("update_farm", f"Could not update farm {farm_id}") from e

        self.db.refresh(farm)
        return FarmResponse.from_model(farm)

    @log_operation("delete_farm")
    def delete(self, farm_id: int) -> None:
        farm = self._get_or_raise(farm_id)
        try:
            self.farm_repo.delete(farm)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise DatabaseError("delete_farm", f"Could not delete farm {farm_id}") from e

    def find_farms_by_criteria(
        self,
        name: Optional[str] = None,
        location: Optional[str] = None
    ) -> List[FarmResponse]:
        try:
            criteria = FarmSearchRequest(name=name, location=location)
        except pydantic.ValidationError as e:
            raise ValidationError(
                "Invalid search criteria",
                invalid_fields={".".join(str(p) for p in err["loc"]): err["msg"] for err in e.errors()}
            ) from e

        if criteria.is_empty():
            return self.find_all()

        farms = self.farm_repo.search(name=criteria.name, location=criteria.location)
        logger.debug(f"Search name={criteria.name!r} location={criteria.location!r} matched {len(farms)} farm(s)")
        return [FarmResponse.from_model(farm) for farm in farms]

    def _get_or_raise(self, farm_id: int) -> Farm:
        farm = self.farm_repo.get_by_id(farm_id)
        if farm is None:
            raise FarmNotFoundError(farm_id)
        return farm
