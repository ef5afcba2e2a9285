"""
Error handling decorators and utilities for API endpoints.

Centralizes the translation of application exceptions into HTTP responses so
every endpoint reports failures the same way.
"""

import inspect
import logging
from functools import wraps
from typing import Callable

from fastapi import HTTPException

from constants import HTTPStatus
from exceptions import (
    ApplicationError,
    ConfigurationError,
    DatabaseError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)


def to_http_exception(operation_name: str, exc: Exception) -> HTTPException:
    """
    Map an exception raised by the service layer to an HTTPException.

    NotFoundError -> 404, ValidationError/ConfigurationError -> 400,
    DatabaseError and other application errors -> 500, anything else -> 500
    with a generic message.
    """
    if isinstance(exc, NotFoundError):
        logger.info(f"{operation_name} - Not found: {exc.message}")
        return HTTPException(status_code=HTTPStatus.NOT_FOUND, detail=exc.message)
    if isinstance(exc, (ValidationError, ConfigurationError)):
        logger.warning(f"{operation_name} - Validation error: {exc.message}")
        return HTTPException(status_code=HTTPStatus.BAD_REQUEST, detail=exc.message)
    if isinstance(exc, DatabaseError):
        logger.error(f"{operation_name} - Database error: {exc.message}", exc_info=exc)
        return HTTPException(
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            detail=f"Database operation failed: {exc.message}"
        )
    if isinstance(exc, ApplicationError):
        logger.error(f"{operation_name} - Application error: {exc.message}", exc_info=exc)
        return HTTPException(
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            detail=f"{operation_name} failed: {exc.message}"
        )

    logger.error(f"{operation_name} - Unexpected error: {exc}", exc_info=exc)
    return HTTPException(
        status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
        detail=f"{operation_name} failed. Please check server logs or contact support."
    )


def handle_api_errors(operation_name: str):
    """
    Decorator to handle common API errors consistently across endpoints.

    Args:
        operation_name: Human-readable name of the operation (e.g., "Farm update")

    Example:
        @handle_api_errors("Farm update")
        def update_farm(farm_id: int, ...):
            return service.update(farm_id, dto)
    """
    def decorator(func: Callable):
        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except HTTPException:
                # Re-raise HTTPException as-is to preserve status code and detail
                raise
            except Exception as e:
                raise to_http_exception(operation_name, e) from e

        @wraps(func)
        def sync_wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except HTTPException:
                raise
            except Exception as e:
                raise to_http_exception(operation_name, e) from e

        if inspect.iscoroutinefunction(func):
            return async_wrapper
        return sync_wrapper

    return decorator
