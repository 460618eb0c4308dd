"""
User repository for registration and lookup.
"""

from lightbnb.repositories.base import BaseRepository
from typing import Any, Dict, Optional
import logging

logger = logging.getLogger(__name__)

SELECT_USER_BY_EMAIL = "SELECT * FROM users\nWHERE email = $1"

SELECT_USER_BY_ID = "SELECT * FROM users\nWHERE id = $1"

INSERT_USER = (
    "INSERT INTO users (name, email, password)\n"
    "VALUES ($1, $2, $3)\n"
    "RETURNING *"
)


class UserRepository(BaseRepository):
    """Repository for the users table."""
    
    async def get_by_email(self, email: str) -> Optional[Dict[str, Any]]:
        """
        Get a single user given their email.
        
        Args:
            email: Email address to search for
            
        Returns:
            User record if found, None otherwise
        """
        return await self.fetch_one(SELECT_USER_BY_EMAIL, [email], f"get user by email {email}")
    
    async def get_by_id(self, user_id: int) -> Optional[Dict[str, Any]]:
        """
        Get a single user given their id.
        
        Returns:
            User record if found, None otherwise
        """
        return await self.fetch_one(SELECT_USER_BY_ID, [user_id], f"get user by id {user_id}")
    
    async def create_user(self, name: str, email: str, password: str) -> Optional[Dict[str, Any]]:
        """
        Add a new user.
        
        Args:
            name: Display name
            email: Unique email address
            password: Hashed password, stored as given
            
        Returns:
            The inserted user record
        """
        user = await self.fetch_one(INSERT_USER, [name, email, password], f"create user {email}")
        if user:
            logger.info(f"Created user: {email} (ID: {user.get('id')})")
        return user
