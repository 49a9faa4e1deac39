"""Runtime configuration model for TIV reports.

This module owns the input and output locations of a report run.
Other modules consume a typed config object instead of raw paths.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from core.constants import ARCHIVE_FILE_PATH, DEFAULT_OUTPUT_DIR, DEFAULT_TOP_COUNTY_LIMIT
from core.errors import TivConfigError


@dataclass(frozen=True)
class ReportConfig:
    """Validated runtime configuration.

    Attributes:
        archive_path: Zip archive holding the policy CSV.
        output_dir: Directory receiving the report files.
        top_county_limit: Number of rows in the growth ranking.
    """

    archive_path: Path
    output_dir: Path
    top_county_limit: int = DEFAULT_TOP_COUNTY_LIMIT

    def __post_init__(self) -> None:
        _validate_top_county_limit(self.top_county_limit)

    @classmethod
    def default(cls) -> "ReportConfig":
        """Build the fixed configuration used by the command line.

        Returns:
            Config resolved against the current working directory.
        """
        return cls(
            archive_path=ARCHIVE_FILE_PATH.resolve(),
            output_dir=DEFAULT_OUTPUT_DIR.resolve(),
        )


def _validate_top_county_limit(limit: int) -> None:
    """Validate the growth ranking size.

    Args:
        limit: Requested number of ranked counties.

    Raises:
        TivConfigError: If limit is not a positive integer.
    """
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
        raise TivConfigError(
            "Invalid top county limit: "
            f"expected positive integer, got '{limit}'. "
            "Use a limit of at least 1."
        )
