"""Unit tests for shared typed models."""

from __future__ import annotations

from pathlib import Path

from core.types import ReportOutcome, ReportRunResult


def test_report_run_result_counts_failed_outcomes(tmp_path: Path) -> None:
    """Run result should fail when any outcome carries an error."""
    outcomes = (
        ReportOutcome(file_name="count.txt", path=tmp_path / "count.txt"),
        ReportOutcome(file_name="tiv2012.txt", path=tmp_path / "tiv2012.txt", error="disk full"),
    )

    result = ReportRunResult(record_count=3, outcomes=outcomes)

    assert outcomes[0].succeeded and not outcomes[1].succeeded
    assert result.failed_count == 1 and result.succeeded is False


def test_report_models_document_their_fields() -> None:
    """Outcome and run result docstrings should list their attributes."""
    for model in (ReportOutcome, ReportRunResult):
        assert "Attributes:" in (model.__doc__ or "")
    assert ReportOutcome.succeeded.__doc__ and ReportRunResult.succeeded.__doc__
