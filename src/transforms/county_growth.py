"""County growth ranking transform.

This module groups policies by county and ranks counties by the
summed change in insured value between 2011 and 2012.
"""

from __future__ import annotations

from typing import Iterable

from core.constants import CSV_DELIMITER, DEFAULT_TOP_COUNTY_LIMIT
from core.types import CountyGrowth, PolicyRecord
from store.report_format import format_decimal


def sum_growth_by_county(records: Iterable[PolicyRecord]) -> dict[str, float]:
    """Build a county to growth mapping in a single pass.

    Args:
        records: Policy records to evaluate.

    Returns:
        Mapping of county name to ``sum(tiv_2012 - tiv_2011)``.
    """
    growth_by_county: dict[str, float] = {}
    for record in records:
        change = record.tiv_2012 - record.tiv_2011
        growth_by_county[record.county] = growth_by_county.get(record.county, 0.0) + change
    return growth_by_county


def rank_counties_by_growth(
    records: Iterable[PolicyRecord],
    limit: int = DEFAULT_TOP_COUNTY_LIMIT,
) -> list[CountyGrowth]:
    """Return the counties with the largest growth.

    Ties on growth are broken by county name ascending so repeated
    runs produce identical rankings.

    Args:
        records: Policy records to evaluate.
        limit: Maximum number of ranked counties.

    Returns:
        At most ``limit`` rows sorted by descending growth.
    """
    growth_by_county = sum_growth_by_county(records)
    ranked = sorted(growth_by_county.items(), key=_ranking_key)
    return [CountyGrowth(county=county, growth=growth) for county, growth in ranked[:limit]]


def render_growth_lines(rows: Iterable[CountyGrowth]) -> list[str]:
    """Render ranked rows as ``county,value`` lines."""
    return [f"{row.county}{CSV_DELIMITER}{format_decimal(row.growth)}" for row in rows]


def _ranking_key(item: tuple[str, float]) -> tuple[float, str]:
    county, growth = item
    return (-growth, county)
