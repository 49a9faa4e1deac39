"""Report document builders.

This module turns loaded policy records into rendered report documents.
Each builder owns one output file name and its line layout.
"""

from __future__ import annotations

from typing import Sequence

from core.constants import (
    COUNT_REPORT_FILE_NAME,
    DEFAULT_TOP_COUNTY_LIMIT,
    MOST_VALUABLE_REPORT_FILE_NAME,
    MOST_VALUABLE_REPORT_HEADER,
    TIV_2012_REPORT_FILE_NAME,
)
from core.types import PolicyRecord, ReportDocument
from store.report_format import format_decimal
from transforms.county_count import count_distinct_counties
from transforms.county_growth import rank_counties_by_growth, render_growth_lines
from transforms.total_value import sum_tiv_2012


def build_count_report(records: Sequence[PolicyRecord]) -> ReportDocument:
    """Build the distinct county count report."""
    count = count_distinct_counties(records)
    return ReportDocument(file_name=COUNT_REPORT_FILE_NAME, header=None, lines=(str(count),))


def build_tiv_2012_report(records: Sequence[PolicyRecord]) -> ReportDocument:
    """Build the total 2012 insured value report."""
    total = sum_tiv_2012(records)
    return ReportDocument(
        file_name=TIV_2012_REPORT_FILE_NAME,
        header=None,
        lines=(format_decimal(total),),
    )


def build_most_valuable_report(
    records: Sequence[PolicyRecord],
    limit: int = DEFAULT_TOP_COUNTY_LIMIT,
) -> ReportDocument:
    """Build the county growth ranking report.

    Args:
        records: Loaded policy records.
        limit: Maximum number of ranked counties.

    Returns:
        Report with the ``country,value`` header and ranked lines.
    """
    rows = rank_counties_by_growth(records, limit)
    return ReportDocument(
        file_name=MOST_VALUABLE_REPORT_FILE_NAME,
        header=MOST_VALUABLE_REPORT_HEADER,
        lines=tuple(render_growth_lines(rows)),
    )


def build_reports(
    records: Sequence[PolicyRecord],
    limit: int = DEFAULT_TOP_COUNTY_LIMIT,
) -> list[ReportDocument]:
    """Build all reports in output order."""
    return [
        build_count_report(records),
        build_tiv_2012_report(records),
        build_most_valuable_report(records, limit),
    ]
