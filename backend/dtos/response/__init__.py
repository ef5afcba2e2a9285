"""
Response DTOs

DTOs for outgoing API responses. These hide the database model and control
exactly which fields are exposed.
"""

from .farm_response import FarmResponse

__all__ = ["FarmResponse"]
