"""
Parameterized SQL assembly for the property search listing.
Turns a sparse mapping of optional search filters into one statement with
positional ($n) placeholders and the matching parameter list.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple
import logging

logger = logging.getLogger(__name__)

DEFAULT_SEARCH_LIMIT = 10

# camelCase spellings sent by the browser client
FILTER_ALIASES = {
    "ownerId": "owner_id",
    "minimumPricePerNight": "minimum_price_per_night",
    "maximumPricePerNight": "maximum_price_per_night",
    "minimumRating": "minimum_rating",
}

SEARCH_SELECT = (
    "SELECT properties.*, avg(property_reviews.rating) as average_rating\n"
    "FROM properties\n"
    "JOIN property_reviews ON properties.id = property_reviews.property_id"
)
SEARCH_GROUP_BY = "GROUP BY properties.id"
SEARCH_ORDER_BY = "ORDER BY properties.cost_per_night"


def _bind_as_is(value: Any) -> Any:
    return value


def _bind_substring(value: Any) -> str:
    return f"%{value}%"


def is_present(value: Any) -> bool:
    """A filter counts only when it carries a value; blank form fields do not."""
    return value is not None and value != ""


@dataclass(frozen=True)
class SearchPredicate:
    """
    One optional search filter.
    
    Attributes:
        key: Filter mapping key the predicate reads
        clause: SQL fragment with a {placeholder} slot
        bind: Converts the filter value into the bound parameter
    """
    key: str
    clause: str
    bind: Callable[[Any], Any] = _bind_as_is
    
    def build(self, filters: Mapping[str, Any], position: int) -> Optional[Tuple[str, Any]]:
        """
        Build the clause for the given placeholder position.
        
        Returns:
            (clause, bound value) or None when the filter is absent
        """
        value = filters.get(self.key)
        if not is_present(value):
            return None
        return self.clause.format(placeholder=f"${position}"), self.bind(value)


# Row filters, in evaluation order
ROW_PREDICATES = (
    SearchPredicate("owner_id", "properties.owner_id = {placeholder}"),
    SearchPredicate("city", "properties.city LIKE {placeholder}", _bind_substring),
    SearchPredicate("minimum_price_per_night", "properties.cost_per_night >= {placeholder}"),
    SearchPredicate("maximum_price_per_night", "properties.cost_per_night <= {placeholder}"),
)

# Filters on the aggregate, applied after grouping
RATING_PREDICATE = SearchPredicate(
    "minimum_rating", "HAVING avg(property_reviews.rating) >= {placeholder}"
)


def normalize_filters(filters: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """
    Map camelCase filter keys onto their snake_case names.
    A snake_case key wins when both spellings are supplied.
    """
    if not filters:
        return {}
    normalized = {key: value for key, value in filters.items() if key not in FILTER_ALIASES}
    for alias, key in FILTER_ALIASES.items():
        if alias in filters:
            normalized.setdefault(key, filters[alias])
    return normalized


def build_search_query(
    filters: Optional[Mapping[str, Any]] = None,
    limit: Optional[int] = DEFAULT_SEARCH_LIMIT
) -> Tuple[str, List[Any]]:
    """
    Build the property search statement.
    
    The first present row filter opens the WHERE clause and every later one
    continues it with AND. Results are grouped per property so the average
    rating is defined. A minimum rating filters the groups with HAVING and
    orders the listing by nightly cost. The limit always binds last.
    
    Args:
        filters: Optional search filters (owner_id, city,
                 minimum_price_per_night, maximum_price_per_night,
                 minimum_rating); unknown keys are ignored
        limit: Maximum number of rows; None means the default of 10
        
    Returns:
        Tuple of (statement text, ordered parameters)
    """
    filters = normalize_filters(filters)
    if limit is None:
        limit = DEFAULT_SEARCH_LIMIT
    
    lines = [SEARCH_SELECT]
    params: List[Any] = []
    where_opened = False
    
    for predicate in ROW_PREDICATES:
        built = predicate.build(filters, len(params) + 1)
        if built is None:
            continue
        clause, value = built
        connective = "AND" if where_opened else "WHERE"
        lines.append(f"{connective} {clause}")
        params.append(value)
        where_opened = True
    
    lines.append(SEARCH_GROUP_BY)
    
    rating = RATING_PREDICATE.build(filters, len(params) + 1)
    if rating is not None:
        clause, value = rating
        lines.append(clause)
        lines.append(SEARCH_ORDER_BY)
        params.append(value)
    
    params.append(limit)
    lines.append(f"LIMIT ${len(params)}")
    
    logger.debug(f"Built property search with {len(params) - 1} filter parameters")
    return "\n".join(lines), params
