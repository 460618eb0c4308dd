"""
Base repository class with the shared statement helpers.
Every repository runs fixed parameterized SQL through an injected executor.
"""

from lightbnb.database import SQLExecutor
from typing import Any, Dict, List, Optional, Sequence
import logging

logger = logging.getLogger(__name__)


class BaseRepository:
    """
    Base repository providing single-row and multi-row fetch helpers.
    Executor errors are logged and re-raised unchanged.
    """
    
    def __init__(self, executor: SQLExecutor):
        """
        Initialize repository with the SQL executor.
        
        Args:
            executor: Object running parameterized statements
        """
        self.executor = executor
    
    async def fetch_one(self, statement: str, params: Sequence[Any], action: str) -> Optional[Dict[str, Any]]:
        """
        Run a statement and return its first row.
        
        Args:
            statement: SQL text with $n placeholders
            params: Values for the placeholders
            action: Short description used in log messages
            
        Returns:
            First row as a dict, or None when no row matched
        """
        try:
            result = await self.executor.execute(statement, params)
        except Exception as e:
            logger.error(f"Failed to {action}: {e}")
            raise
        
        if not result.rows:
            logger.debug(f"No row found to {action}")
            return None
        
        logger.debug(f"Fetched row to {action}")
        return result.rows[0]
    
    async def fetch_all(self, statement: str, params: Sequence[Any], action: str) -> List[Dict[str, Any]]:
        """
        Run a statement and return every row.
        
        Returns:
            List of rows as dicts, empty when nothing matched
        """
        try:
            result = await self.executor.execute(statement, params)
        except Exception as e:
            logger.error(f"Failed to {action}: {e}")
            raise
        
        logger.debug(f"Fetched {len(result.rows)} rows to {action}")
        return list(result.rows)
