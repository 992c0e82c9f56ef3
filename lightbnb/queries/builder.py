"""
Dynamic query construction for property search.
Turns a sparse set of search filters into a positional-parameter SQL query.
"""

from dataclasses import dataclass, fields
from typing import Any, Callable, Iterator, List, Mapping, Optional, Tuple
import logging
import re

logger = logging.getLogger(__name__)

# Result of coercing a value with no leading integer
INVALID_NUMBER = float("nan")

DEFAULT_LIMIT = 10

BASE_QUERY = """
    SELECT properties.*, avg(property_reviews.rating) AS average_rating
    FROM properties
    JOIN property_reviews ON property_reviews.property_id = properties.id
"""

GROUP_BY = "GROUP BY properties.id"
ORDER_BY = "ORDER BY properties.cost_per_night"

_LEADING_INTEGER = re.compile(r"^\s*([+-]?\d+)")


def coerce_int(value: Any) -> Any:
    """
    Coerce a filter value to an integer using leading-integer parsing.

    "100" and "100abc" give 100, "4.5" gives 4. Values without a leading
    integer give INVALID_NUMBER rather than raising.
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    match = _LEADING_INTEGER.match(str(value))
    if not match:
        return INVALID_NUMBER
    return int(match.group(1))


def substring_pattern(value: Any) -> str:
    """Wrap a value in LIKE wildcards for substring matching."""
    return f"%{value}%"


@dataclass(frozen=True)
class FilterCriteria:
    """Optional property search constraints. An unset filter means no constraint."""

    city: Optional[str] = None
    owner_id: Optional[Any] = None
    minimum_price_per_night: Optional[Any] = None
    maximum_price_per_night: Optional[Any] = None
    minimum_rating: Optional[Any] = None

    @classmethod
    def from_mapping(cls, options: Optional[Mapping[str, Any]]) -> "FilterCriteria":
        """Build criteria from a mapping such as request query options, ignoring unknown keys."""
        if not options:
            return cls()
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in options.items() if key in known})

    def is_set(self, name: str) -> bool:
        """None, the empty string and numeric zero leave a filter unset."""
        value = getattr(self, name)
        if value is None or value == "":
            return False
        if isinstance(value, (int, float)) and value == 0:
            return False
        return True


@dataclass(frozen=True)
class QueryPlan:
    """Query text with $n placeholders and the parameters bound to them, in order."""

    text: str
    params: Tuple[Any, ...]

    def __iter__(self) -> Iterator[Any]:
        # Allows ``query, params = plan``
        yield self.text
        yield self.params


@dataclass(frozen=True)
class FilterClause:
    """A single optional filter: which criteria field, its SQL template, and how its value is bound."""

    field: str
    template: str
    coerce: Callable[[Any], Any]


WHERE_CLAUSES: Tuple[FilterClause, ...] = (
    FilterClause("city", "properties.city LIKE {}", substring_pattern),
    FilterClause("owner_id", "properties.owner_id = {}", coerce_int),
    FilterClause("minimum_price_per_night", "properties.cost_per_night > {}", coerce_int),
    FilterClause("maximum_price_per_night", "properties.cost_per_night < {}", coerce_int),
)

HAVING_CLAUSES: Tuple[FilterClause, ...] = (
    FilterClause("minimum_rating", "avg(property_reviews.rating) >= {}", coerce_int),
)


class PropertySearchQueryBuilder:
    """
    Builds the property search query from FilterCriteria.

    Clauses are taken from ordered tables and folded into the query, so the
    order of conditions and the placeholder numbering always agree with the
    order of the parameter list. Values are only ever bound as parameters.
    """

    def __init__(
        self,
        where_clauses: Tuple[FilterClause, ...] = WHERE_CLAUSES,
        having_clauses: Tuple[FilterClause, ...] = HAVING_CLAUSES
    ):
        self.where_clauses = where_clauses
        self.having_clauses = having_clauses

    def build(self, criteria: FilterCriteria, limit: Any = DEFAULT_LIMIT) -> QueryPlan:
        """
        Build a fresh query plan.

        Args:
            criteria: Search filters; unset fields add no condition
            limit: Maximum number of rows, always bound as the last parameter

        Returns:
            QueryPlan with query text and ordered parameters
        """
        params: List[Any] = []

        def bind(value: Any) -> str:
            params.append(value)
            return f"${len(params)}"

        parts = [BASE_QUERY.strip()]

        conditions = self._render(self.where_clauses, criteria, bind)
        if conditions:
            parts.append("WHERE " + "\nAND ".join(conditions))

        parts.append(GROUP_BY)

        having = self._render(self.having_clauses, criteria, bind)
        if having:
            parts.append("HAVING " + "\nAND ".join(having))

        parts.append(ORDER_BY)
        parts.append(f"LIMIT {bind(limit)};")

        plan = QueryPlan(text="\n".join(parts), params=tuple(params))
        logger.debug(f"Built property search query with {len(plan.params)} parameters")
        return plan

    @staticmethod
    def _render(
        clauses: Tuple[FilterClause, ...],
        criteria: FilterCriteria,
        bind: Callable[[Any], str]
    ) -> List[str]:
        return [
            clause.template.format(bind(clause.coerce(getattr(criteria, clause.field))))
            for clause in clauses
            if criteria.is_set(clause.field)
        ]


def build_property_search(criteria: FilterCriteria, limit: Any = DEFAULT_LIMIT) -> QueryPlan:
    """Build a property search plan with the default clause tables."""
    return PropertySearchQueryBuilder().build(criteria, limit)
