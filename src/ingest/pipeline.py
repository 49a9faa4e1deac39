"""Report pipeline orchestration.

This module coordinates record loading, aggregation, and report writes.
Each report is written independently so one failure does not suppress
the others.
"""

from __future__ import annotations

from core.config import ReportConfig
from core.errors import TivError
from core.logging_config import get_logger
from core.types import ReportDocument, ReportOutcome, ReportRunResult
from ingest.archive_reader import read_policy_records
from store.report_builders import build_reports
from store.report_writer import write_report

_LOGGER = get_logger(__name__)


def generate_reports(config: ReportConfig) -> ReportRunResult:
    """Load policy records and write all report files.

    Args:
        config: Runtime configuration.

    Returns:
        Run summary with one outcome per report.

    Raises:
        TivIngestError: If the archive cannot be loaded. No report is
            written in that case.
    """
    records = read_policy_records(config.archive_path)
    documents = build_reports(records, config.top_county_limit)
    outcomes = tuple(_write_isolated(config, document) for document in documents)
    result = ReportRunResult(record_count=len(records), outcomes=outcomes)
    _LOGGER.info(
        "report_run_completed",
        archive_path=str(config.archive_path),
        output_dir=str(config.output_dir),
        record_count=result.record_count,
        report_count=len(result.outcomes),
        failed_count=result.failed_count,
    )
    return result


def _write_isolated(config: ReportConfig, document: ReportDocument) -> ReportOutcome:
    """Write one report, recording failure instead of raising."""
    destination = config.output_dir / document.file_name
    try:
        path = write_report(config.output_dir, document)
    except TivError as error:
        _LOGGER.error("report_failed", file_name=document.file_name, error=str(error))
        return ReportOutcome(file_name=document.file_name, path=destination, error=str(error))
    _LOGGER.info("report_written", file_name=document.file_name, path=str(path))
    return ReportOutcome(file_name=document.file_name, path=path)
