"""
Service layer exposed to the web request handlers.
"""

from lightbnb.services.booking import BookingService, get_booking_service

__all__ = [
    "BookingService",
    "get_booking_service"
]
