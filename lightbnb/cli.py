#!/usr/bin/env python3
"""
Command line property search.
Builds the listing search from command line filters and either prints the
statement or runs it against the configured database.
"""

import argparse
import asyncio
import json
import logging
import sys
from typing import Any, Dict, List, Optional, Sequence

from pydantic import ValidationError

from lightbnb.config import get_settings
from lightbnb.database import check_database_connection, close_db_connection, get_executor
from lightbnb.schemas import PropertySearchFilters
from lightbnb.services import BookingService
from lightbnb.utils.logging_config import configure_logging
from lightbnb.utils.query_builder import build_search_query

logger = logging.getLogger(__name__)


def positive_int(value: str) -> int:
    """argparse type for limits."""
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer: {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lightbnb-search",
        description="Search LightBnB property listings"
    )
    parser.add_argument("--owner-id", type=int, dest="owner_id", help="Only listings owned by this user")
    parser.add_argument("--city", help="Substring of the city (case-sensitive)")
    parser.add_argument("--min-price", type=int, dest="minimum_price_per_night", help="Minimum nightly cost")
    parser.add_argument("--max-price", type=int, dest="maximum_price_per_night", help="Maximum nightly cost")
    parser.add_argument("--min-rating", type=float, dest="minimum_rating", help="Minimum average rating")
    parser.add_argument("--limit", type=positive_int, help="Maximum number of listings")
    parser.add_argument(
        "--show-sql",
        action="store_true",
        help="Print the statement and its parameters without running it"
    )
    return parser


def filters_from_args(args: argparse.Namespace) -> Dict[str, Any]:
    """Collect the filter options that were given."""
    names = ("owner_id", "city", "minimum_price_per_night", "maximum_price_per_night", "minimum_rating")
    return {name: getattr(args, name) for name in names if getattr(args, name) is not None}


async def run_search(filters: PropertySearchFilters, limit: int) -> List[Dict[str, Any]]:
    """Run the search on the configured database and close the pool afterwards."""
    executor = get_executor()
    try:
        if not await check_database_connection(executor):
            raise ConnectionError("Database is not reachable")
        service = BookingService(executor)
        return await service.search_properties(filters, limit)
    finally:
        await close_db_connection()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main CLI interface for property search."""
    parser = build_parser()
    args = parser.parse_args(argv)
    
    settings = get_settings()
    configure_logging(settings.log_level)
    
    try:
        filters = PropertySearchFilters.model_validate(filters_from_args(args))
    except ValidationError as e:
        parser.error(str(e))
    
    limit = args.limit if args.limit is not None else settings.default_search_limit
    
    if args.show_sql:
        statement, params = build_search_query(filters.to_filter_mapping(), limit)
        print(statement)
        print(json.dumps(params))
        return 0
    
    try:
        rows = asyncio.run(run_search(filters, limit))
    except Exception as e:
        logger.error(f"Property search failed: {e}")
        return 1
    
    print(json.dumps(rows, indent=2, default=str))
    return 0


if __name__ == "__main__":
    sys.exit(main())
