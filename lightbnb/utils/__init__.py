"""
Utility modules for query assembly and logging setup.
"""

from lightbnb.utils.query_builder import build_search_query, DEFAULT_SEARCH_LIMIT
from lightbnb.utils.logging_config import configure_logging

__all__ = [
    "build_search_query",
    "DEFAULT_SEARCH_LIMIT",
    "configure_logging",
]
