"""Shared typed models.

This module defines immutable data models used by ingest, transforms,
store, and CLI layers to keep interfaces explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class PolicyRecord:
    """One parsed policy row.

    Attributes:
        county: County name, used verbatim as grouping key.
        tiv_2011: Total insured value for 2011.
        tiv_2012: Total insured value for 2012.
    """

    county: str
    tiv_2011: float
    tiv_2012: float


@dataclass(frozen=True)
class CountyGrowth:
    """Aggregated year-over-year change for one county.

    Attributes:
        county: County name.
        growth: Sum of ``tiv_2012 - tiv_2011`` over the county's policies.
    """

    county: str
    growth: float


@dataclass(frozen=True)
class ReportDocument:
    """Rendered report ready for writing.

    Attributes:
        file_name: Destination file name inside the output directory.
        header: Optional first line written before content.
        lines: Ordered content lines without terminators.
    """

    file_name: str
    header: str | None
    lines: tuple[str, ...]


@dataclass(frozen=True)
class ReportOutcome:
    """Result of generating one report file.

    Attributes:
        file_name: Report file name.
        path: Destination path of the report.
        error: Failure message, or None when the file was written.
    """

    file_name: str
    path: Path
    error: str | None = None

    @property
    def succeeded(self) -> bool:
        """Return whether the report file was written."""
        return self.error is None


@dataclass(frozen=True)
class ReportRunResult:
    """Summary of one pipeline run.

    Attributes:
        record_count: Number of policy records loaded.
        outcomes: Per-report outcomes in generation order.
    """

    record_count: int
    outcomes: tuple[ReportOutcome, ...]

    @property
    def failed_count(self) -> int:
        """Return the number of reports that could not be written."""
        return sum(1 for outcome in self.outcomes if not outcome.succeeded)

    @property
    def succeeded(self) -> bool:
        """Return whether every report file was written."""
        return self.failed_count == 0
