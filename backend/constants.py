"""
Application-wide constants.

This module centralizes the magic strings and numbers used throughout the
application so routes, validation and server startup agree on them.
"""


class ServerConfig:
    """Server configuration defaults (overridable via environment)"""

    HOST = "0.0.0.0"
    PORT = 8080


class ApiRoutes:
    """URL prefixes for the HTTP surface"""

    API_V1 = "/api/v1"
    FARMS = "/farms"
    HEALTH = "/api/health"


class FarmLimits:
    """Validation bounds for farm attributes"""

    NAME_MAX_LENGTH = 255
    LOCATION_MAX_LENGTH = 255

    # Hectares
    SQUARE_METERS_PER_HECTARE = 10_000
    ACRES_PER_HECTARE = 2.47105


class LogConfig:
    """Logging defaults"""

    FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    MAX_BYTES = 10 * 1024 * 1024  # 10MB
    BACKUP_COUNT = 5
    BODY_PREVIEW_LIMIT = 2000
    REQUEST_ID_HEADER = "X-Request-ID"


class HTTPStatus:
    """HTTP status codes used throughout the application"""

    # Success
    OK = 200
    CREATED = 201
    NO_CONTENT = 204

    # Client Errors
    BAD_REQUEST = 400
    NOT_FOUND = 404

    # Server Errors
    INTERNAL_SERVER_ERROR = 500
