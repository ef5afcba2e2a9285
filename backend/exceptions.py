"""
Custom exception classes for the application.

This module defines domain-specific exceptions that provide better error handling
and clearer error messages throughout the application.
"""


class ApplicationError(Exception):
    """Base exception for all application errors"""

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ConfigurationError(ApplicationError):
    """Raised when there's a configuration issue"""

    def __init__(self, message: str, invalid_keys: list[str] | None = None):
        details = {"invalid_keys": invalid_keys} if invalid_keys else {}
        super().__init__(message, details)


class NotFoundError(ApplicationError):
    """Raised when a requested entity does not exist"""

    def __init__(self, entity: str, entity_id, message: str | None = None):
        details = {"entity": entity, "id": entity_id}
        msg = message or f"{entity} with id {entity_id} not found"
        super().__init__(msg, details)


class FarmNotFoundError(NotFoundError):
    """Raised when no farm exists with the given id"""

    def __init__(self, farm_id: int):
        self.farm_id = farm_id
        super().__init__("Farm", farm_id)


class ValidationError(ApplicationError):
    """Raised when validation fails"""

    def __init__(self, message: str, invalid_fields: dict | None = None):
        details = {"invalid_fields": invalid_fields} if invalid_fields else {}
        super().__init__(message, details)


class DatabaseError(ApplicationError):
    """Raised when database operations fail"""

    def __init__(self, operation: str, message: str):
        details = {"operation": operation}
        super().__init__(message, details)
