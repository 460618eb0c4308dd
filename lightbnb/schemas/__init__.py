"""
Pydantic schemas for input validation.
"""

from .user import UserCreate
from .property import PropertyCreate, PropertySearchFilters
from .common import ResultLimit, validate_limit

__all__ = [
    "UserCreate",
    "PropertyCreate",
    "PropertySearchFilters",
    "ResultLimit",
    "validate_limit",
]
