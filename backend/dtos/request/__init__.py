"""
Request DTOs

DTOs for incoming API requests. Validation happens here, at the API
boundary, so the service only ever sees well-formed input.
"""

from .farm_request import FarmRequest, FarmSearchRequest

__all__ = ["FarmRequest", "FarmSearchRequest"]
