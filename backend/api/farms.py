"""
Farms API endpoints

Handlers only marshal parameters into one IFarmService call and wrap the
result with a status code. Routing and documentation metadata live in the
FARM_ROUTES table at the bottom of the module.
"""
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Path, Query, Response

from constants import ApiRoutes, FarmLimits, HTTPStatus
from dependencies import get_farm_service
from dtos.request import FarmRequest
from dtos.response import FarmResponse
from exceptions import FarmNotFoundError
from services.interfaces import IFarmService
from utils.error_handlers import handle_api_errors

router = APIRouter(prefix=ApiRoutes.FARMS, tags=["farms"])


@handle_api_errors("List farms")
def get_all_farms(service: IFarmService = Depends(get_farm_service)) -> List[FarmResponse]:
    return service.find_all()


@handle_api_errors("Get farm")
def get_farm_by_id(
    farm_id: int = Path(description="Farm ID"),
    service: IFarmService = Depends(get_farm_service),
) -> FarmResponse:
    farm = service.find_by_id(farm_id)
    if farm is None:
        raise FarmNotFoundError(farm_id)
    return farm


@handle_api_errors("Create farm")
def create_farm(
    payload: FarmRequest = Body(),
    service: IFarmService = Depends(get_farm_service),
) -> FarmResponse:
    return service.create(payload)


@handle_api_errors("Update farm")
def update_farm(
    farm_id: int = Path(description="Farm ID"),
    payload: FarmRequest = Body(),
    service: IFarmService = Depends(get_farm_service),
) -> FarmResponse:
    return service.update(farm_id, payload)


@handle_api_errors("Delete farm")
def delete_farm(
    farm_id: int = Path(description="Farm ID"),
    service: IFarmService = Depends(get_farm_service),
) -> Response:
    service.delete(farm_id)
    return Response(status_code=HTTPStatus.NO_CONTENT)


@handle_api_errors("Search farms")
def search_farms(
    name: Optional[str] = Query(None, max_length=FarmLimits.NAME_MAX_LENGTH, description="Name contains (case-insensitive)"),
    location: Optional[str] = Query(None, max_length=FarmLimits.LOCATION_MAX_LENGTH, description="Location contains (case-insensitive)"),
    service: IFarmService = Depends(get_farm_service),
) -> List[FarmResponse]:
    return service.find_farms_by_criteria(name=name, location=location)


# ============================================================
# Route table
# ============================================================

_SERVER_ERROR = {HTTPStatus.INTERNAL_SERVER_ERROR: {"description": "Internal server error"}}
_NOT_FOUND = {HTTPStatus.NOT_FOUND: {"description": "Farm not found"}}
_BAD_REQUEST = {HTTPStatus.BAD_REQUEST: {"description": "Invalid input"}}


@dataclass(frozen=True)
class RouteSpec:
    """One row of the route table."""

    method: str
    path: str
    endpoint: Callable[..., Any]
    status_code: int
    summary: str
    description: str
    response_model: Any = None
    responses: Dict[int, Dict[str, Any]] = field(default_factory=dict)


# "/search" must be registered before "/{farm_id}"
FARM_ROUTES: List[RouteSpec] = [
    RouteSpec(
        "GET", "", get_all_farms, HTTPStatus.OK,
        summary="Retrieve all farms",
        description="Get a list of all farms in the system.",
        response_model=List[FarmResponse],
        responses={**_SERVER_ERROR},
    ),
    RouteSpec(
        "GET", "/search", search_farms, HTTPStatus.OK,
        summary="Search farms",
        description="Search farms by name and/or location. Omitted filters match any value.",
        response_model=List[FarmResponse],
        responses={**_BAD_REQUEST, **_SERVER_ERROR},
    ),
    RouteSpec(
        "GET", "/{farm_id}", get_farm_by_id, HTTPStatus.OK,
        summary="Get a farm by ID",
        description="Retrieve a specific farm using its ID.",
        response_model=FarmResponse,
        responses={**_NOT_FOUND, **_SERVER_ERROR},
    ),
    RouteSpec(
        "POST", "", create_farm, HTTPStatus.CREATED,
        summary="Create a new farm",
        description="Create a new farm with the provided details.",
        response_model=FarmResponse,
        responses={**_BAD_REQUEST, **_SERVER_ERROR},
    ),
    RouteSpec(
        "PUT", "/{farm_id}", update_farm, HTTPStatus.OK,
        summary="Update a farm",
        description="Replace an existing farm's details by its ID.",
        response_model=FarmResponse,
        responses={**_NOT_FOUND, **_BAD_REQUEST, **_SERVER_ERROR},
    ),
    RouteSpec(
        "DELETE", "/{farm_id}", delete_farm, HTTPStatus.NO_CONTENT,
        summary="Delete a farm",
        description="Delete a farm by its ID.",
        responses={**_NOT_FOUND, **_SERVER_ERROR},
    ),
]


def register_routes(target: APIRouter, routes: List[RouteSpec]) -> None:
    """Add every route of the table to the router."""
    for route in routes:
        target.add_api_route(
            route.path,
            route.endpoint,
            methods=[route.method],
            status_code=route.status_code,
            response_model=route.response_model,
            summary=route.summary,
            description=route.description,
            responses=route.responses,
        )


register_routes(router, FARM_ROUTES)
