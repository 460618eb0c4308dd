"""
Property repository for listing search and listing creation.
Search statements come from the query builder; creation is a fixed insert.
"""

from lightbnb.repositories.base import BaseRepository
from lightbnb.utils.query_builder import DEFAULT_SEARCH_LIMIT, build_search_query
from typing import Any, Dict, List, Mapping, Optional
import logging

logger = logging.getLogger(__name__)

# Column order of the insert; values bind positionally in this order
PROPERTY_COLUMNS = (
    "owner_id",
    "title",
    "description",
    "thumbnail_photo_url",
    "cover_photo_url",
    "cost_per_night",
    "parking_spaces",
    "number_of_bathrooms",
    "number_of_bedrooms",
    "country",
    "street",
    "city",
    "province",
    "post_code",
)

INSERT_PROPERTY = (
    f"INSERT INTO properties ({', '.join(PROPERTY_COLUMNS)})\n"
    f"VALUES ({', '.join(f'${i}' for i in range(1, len(PROPERTY_COLUMNS) + 1))})\n"
    "RETURNING *"
)


class PropertyRepository(BaseRepository):
    """Repository for the properties table."""
    
    async def search(
        self,
        filters: Optional[Mapping[str, Any]] = None,
        limit: int = DEFAULT_SEARCH_LIMIT
    ) -> List[Dict[str, Any]]:
        """
        Search properties with their average rating.
        
        Args:
            filters: Optional search filters, see build_search_query
            limit: Maximum number of properties to return
            
        Returns:
            List of property records, each with an average_rating
        """
        statement, params = build_search_query(filters, limit)
        return await self.fetch_all(statement, params, "search properties")
    
    async def create_property(self, property_data: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Add a property listing.
        
        Args:
            property_data: Column values; a missing description is stored as NULL
            
        Returns:
            The inserted property record
        """
        params = [property_data.get(column) for column in PROPERTY_COLUMNS]
        created = await self.fetch_one(INSERT_PROPERTY, params, "create property")
        if created:
            logger.info(f"Created property: {created.get('title')} (ID: {created.get('id')})")
        return created
