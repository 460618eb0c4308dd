"""
LightBnB data-access layer: users, property listings and reservations.
"""

from lightbnb.services import BookingService, get_booking_service
from lightbnb.utils.query_builder import build_search_query

__version__ = "1.0.0"

__all__ = [
    "BookingService",
    "get_booking_service",
    "build_search_query",
]
