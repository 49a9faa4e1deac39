"""Unit tests for county count transform."""

from __future__ import annotations

from core.types import PolicyRecord
from transforms.county_count import count_distinct_counties


def test_count_distinct_counties_is_case_sensitive() -> None:
    """Counties differing only by case or spacing should count separately."""
    records = [
        PolicyRecord(county="Alpha", tiv_2011=0.0, tiv_2012=0.0),
        PolicyRecord(county="alpha", tiv_2011=0.0, tiv_2012=0.0),
        PolicyRecord(county="Alpha ", tiv_2011=0.0, tiv_2012=0.0),
        PolicyRecord(county="Alpha", tiv_2011=1.0, tiv_2012=2.0),
    ]

    assert count_distinct_counties(records) == 3


def test_count_distinct_counties_is_zero_for_empty_input() -> None:
    """Empty input should count zero counties."""
    assert count_distinct_counties([]) == 0
