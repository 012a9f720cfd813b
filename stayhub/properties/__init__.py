"""
Property Catalog Module

Host-owned property listings:

- service.py: CRUD, ownership checks, attribute filtering and visibility rules
- schemas.py: Pydantic models for property records and filters
"""

from .service import PropertyService
from .schemas import Property, PropertyCreate, PropertyUpdate, PropertyFilters, PropertyStatus

__all__ = [
    "PropertyService",
    "Property",
    "PropertyCreate",
    "PropertyUpdate",
    "PropertyFilters",
    "PropertyStatus"
]
