"""Public SDK surface for TIV reports.

This module provides a stable import path for library users.
It re-exports the pipeline entry point and typed models.
"""

from __future__ import annotations

from core.config import ReportConfig
from core.errors import TivConfigError, TivError, TivIngestError, TivWriteError
from core.types import CountyGrowth, PolicyRecord, ReportDocument, ReportOutcome, ReportRunResult
from ingest.archive_reader import read_policy_records
from ingest.pipeline import generate_reports
from store.report_builders import build_reports
from store.report_format import format_decimal
from store.report_writer import write_report
from transforms.county_count import count_distinct_counties
from transforms.county_growth import rank_counties_by_growth
from transforms.total_value import sum_tiv_2012

__all__ = [
    "CountyGrowth",
    "PolicyRecord",
    "ReportConfig",
    "ReportDocument",
    "ReportOutcome",
    "ReportRunResult",
    "TivConfigError",
    "TivError",
    "TivIngestError",
    "TivWriteError",
    "build_reports",
    "count_distinct_counties",
    "format_decimal",
    "generate_reports",
    "rank_counties_by_growth",
    "read_policy_records",
    "sum_tiv_2012",
    "write_report",
]
