"""TIV report CLI entry point.

This module runs the fixed report pipeline against the archive in the
working directory and maps pipeline failures onto exit codes.
"""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from core.config import ReportConfig
from core.constants import SUCCESS_MESSAGE
from core.errors import TivError
from core.logging_config import get_logger
from ingest.pipeline import generate_reports

_LOGGER = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    return argparse.ArgumentParser(
        prog="tiv-reports",
        description=(
            "Write count.txt, tiv2012.txt and most_valuable.txt "
            "from FL_insurance.csv.zip in the working directory"
        ),
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the report CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    build_parser().parse_args(argv)
    return run_reports(ReportConfig.default())


def run_reports(config: ReportConfig) -> int:
    """Generate reports and print the user-facing result.

    Args:
        config: Runtime configuration.

    Returns:
        ``0`` when every report was written, else ``1``.
    """
    try:
        result = generate_reports(config)
    except TivError as error:
        _LOGGER.error("report_run_aborted", error=str(error))
        print(f"error={error}", file=sys.stderr)
        return 1
    if not result.succeeded:
        for outcome in result.outcomes:
            if outcome.error is not None:
                print(f"error={outcome.error}", file=sys.stderr)
        return 1
    print(SUCCESS_MESSAGE)
    return 0
