"""
Dependency injection providers for FastAPI.

This module provides factory functions for creating repository and service instances,
following the Dependency Inversion Principle. Route handlers receive the service
as a parameter, so tests can swap it through app.dependency_overrides.
"""

from sqlalchemy.orm import Session
from fastapi import Depends
from database import get_db
from repositories.farm_repository import FarmRepository
from services.interfaces import IFarmService
from services.farm_service import FarmService


def get_farm_repository(db: Session = Depends(get_db)) -> FarmRepository:
    """
    Factory function for creating FarmRepository instances.

    Args:
        db: Database session (injected)
    """
    return FarmRepository(db)


def get_farm_service(
    db: Session = Depends(get_db),
    farm_repo: FarmRepository = Depends(get_farm_repository),
) -> IFarmService:
    """
    Factory function for creating FarmService instances.

    Args:
        db: Database session (injected)
        farm_repo: Farm repository bound to the same session

    Returns:
        IFarmService: Farm service implementation
    """
    return FarmService(db, farm_repo)
