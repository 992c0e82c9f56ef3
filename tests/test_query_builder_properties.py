"""
Property-based tests for property search query construction.

These check that placeholder numbering and parameter order agree for
randomly generated filter combinations.
"""

import re

from hypothesis import given, settings, strategies as st

from lightbnb.queries.builder import FilterCriteria, build_property_search

PLACEHOLDER = re.compile(r"\$(\d+)")

cities = st.none() | st.text(min_size=1, max_size=40)
integers = st.none() | st.integers(min_value=0, max_value=1_000_000)
ratings = st.none() | st.integers(min_value=0, max_value=5)
limits = st.integers(min_value=1, max_value=100)

criteria_strategy = st.builds(
    FilterCriteria,
    city=cities,
    owner_id=integers,
    minimum_price_per_night=integers,
    maximum_price_per_night=integers,
    minimum_rating=ratings,
)


@given(criteria=criteria_strategy, limit=limits)
@settings(max_examples=200)
def test_placeholders_match_parameters(criteria, limit):
    """Placeholders are numbered 1..n in order of appearance, one per parameter."""
    plan = build_property_search(criteria, limit)

    numbers = [int(n) for n in PLACEHOLDER.findall(plan.text)]
    assert numbers == list(range(1, len(plan.params) + 1))


@given(criteria=criteria_strategy, limit=limits)
@settings(max_examples=200)
def test_limit_is_always_last(criteria, limit):
    plan = build_property_search(criteria, limit)

    assert plan.params[-1] == limit
    assert plan.text.rstrip().endswith(f"LIMIT ${len(plan.params)};")


@given(criteria=criteria_strategy)
@settings(max_examples=200)
def test_where_present_only_with_where_filters(criteria):
    plan = build_property_search(criteria)

    where_filters = [
        criteria.city,
        criteria.owner_id,
        criteria.minimum_price_per_night,
        criteria.maximum_price_per_night,
    ]
    has_where_filter = any(value not in (None, "", 0) for value in where_filters)
    assert ("WHERE" in plan.text) == has_where_filter
    assert ("HAVING" in plan.text) == (criteria.minimum_rating not in (None, 0))
    assert "GROUP BY" in plan.text
