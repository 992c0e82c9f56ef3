"""
Query construction for property search.
"""

from lightbnb.queries.builder import (
    DEFAULT_LIMIT,
    INVALID_NUMBER,
    FilterClause,
    FilterCriteria,
    PropertySearchQueryBuilder,
    QueryPlan,
    build_property_search,
    coerce_int,
)

__all__ = [
    "DEFAULT_LIMIT",
    "INVALID_NUMBER",
    "FilterClause",
    "FilterCriteria",
    "PropertySearchQueryBuilder",
    "QueryPlan",
    "build_property_search",
    "coerce_int",
]
