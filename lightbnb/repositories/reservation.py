"""
Reservation repository. Reservations are read-only here.
"""

from lightbnb.repositories.base import BaseRepository
from typing import Any, Dict, List

SELECT_RESERVATIONS_FOR_GUEST = (
    "SELECT * FROM reservations\n"
    "WHERE guest_id = $1\n"
    "LIMIT $2"
)


class ReservationRepository(BaseRepository):
    """Repository for the reservations table."""
    
    async def list_for_guest(self, guest_id: int, limit: int = 10) -> List[Dict[str, Any]]:
        """
        Get all reservations for a single guest.
        
        Args:
            guest_id: ID of the guest user
            limit: Maximum number of reservations to return
            
        Returns:
            List of reservation records
        """
        return await self.fetch_all(
            SELECT_RESERVATIONS_FOR_GUEST,
            [guest_id, limit],
            f"list reservations for guest {guest_id}"
        )
