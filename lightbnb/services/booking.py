"""
Booking data service: the operations the web layer calls.
Validates input with the pydantic schemas and delegates to the repositories.
"""

from lightbnb.config import Settings, get_settings
from lightbnb.database import SQLExecutor, get_executor
from lightbnb.repositories import PropertyRepository, ReservationRepository, UserRepository
from lightbnb.schemas import PropertyCreate, PropertySearchFilters, UserCreate, validate_limit
from typing import Any, Dict, List, Mapping, Optional, Union
import logging

logger = logging.getLogger(__name__)


class BookingService:
    """
    Users, reservations and property listings for the booking application.
    
    Every operation is one round trip to the executor. Lookups that match no
    row resolve to None or an empty list; executor errors propagate unchanged.
    """
    
    def __init__(self, executor: SQLExecutor, settings: Optional[Settings] = None):
        self.executor = executor
        self.settings = settings or get_settings()
        self.user_repo = UserRepository(executor)
        self.reservation_repo = ReservationRepository(executor)
        self.property_repo = PropertyRepository(executor)
    
    # Users
    
    async def get_user_by_email(self, email: str) -> Optional[Dict[str, Any]]:
        """Get a single user given their email, or None."""
        return await self.user_repo.get_by_email(email)
    
    async def get_user_by_id(self, user_id: int) -> Optional[Dict[str, Any]]:
        """Get a single user given their id, or None."""
        return await self.user_repo.get_by_id(user_id)
    
    async def create_user(self, user: Union[UserCreate, Mapping[str, Any]]) -> Optional[Dict[str, Any]]:
        """
        Register a new user.
        
        Args:
            user: name, email and already-hashed password
            
        Returns:
            The inserted user record
            
        Raises:
            pydantic.ValidationError: If the user data is invalid
        """
        user_in = user if isinstance(user, UserCreate) else UserCreate.model_validate(user)
        return await self.user_repo.create_user(user_in.name, user_in.email, user_in.password)
    
    # Reservations
    
    async def list_reservations_for_guest(
        self,
        guest_id: int,
        limit: Optional[int] = None
    ) -> List[Dict[str, Any]]:
        """
        Get all reservations for a single guest.
        
        Args:
            guest_id: ID of the guest user
            limit: Maximum number of reservations; defaults to the configured limit
            
        Raises:
            pydantic.ValidationError: If the limit is not a positive integer
        """
        if limit is None:
            limit = self.settings.default_reservation_limit
        limit = validate_limit(limit)
        return await self.reservation_repo.list_for_guest(guest_id, limit)
    
    # Properties
    
    async def search_properties(
        self,
        filters: Union[PropertySearchFilters, Mapping[str, Any], None] = None,
        limit: Optional[int] = None
    ) -> List[Dict[str, Any]]:
        """
        Search property listings.
        
        Args:
            filters: Search filters as a schema instance or a mapping with
                     snake_case or camelCase keys
            limit: Maximum number of properties; defaults to the configured limit
            
        Returns:
            Property records with their average rating
            
        Raises:
            pydantic.ValidationError: If a filter value is invalid or the limit
                is not a positive integer
        """
        if filters is None:
            filters = PropertySearchFilters()
        elif not isinstance(filters, PropertySearchFilters):
            filters = PropertySearchFilters.model_validate(filters)
        
        if limit is None:
            limit = self.settings.default_search_limit
        limit = validate_limit(limit)
        
        properties = await self.property_repo.search(filters.to_filter_mapping(), limit)
        logger.debug(f"Property search returned {len(properties)} results")
        return properties
    
    async def create_property(self, property_in: Union[PropertyCreate, Mapping[str, Any]]) -> Optional[Dict[str, Any]]:
        """
        Create a property listing.
        
        Raises:
            pydantic.ValidationError: If the property data is invalid
        """
        if not isinstance(property_in, PropertyCreate):
            property_in = PropertyCreate.model_validate(property_in)
        return await self.property_repo.create_property(property_in.model_dump())


def get_booking_service(executor: Optional[SQLExecutor] = None) -> BookingService:
    """
    Build a booking service.
    Uses the shared executor for the configured database unless one is given.
    """
    return BookingService(executor or get_executor())
