"""Report file persistence.

This module writes rendered reports as UTF-8 text files.
Files are replaced atomically so readers never see partial output.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from core.constants import REPORT_LINE_TERMINATOR, REPORT_TEXT_ENCODING
from core.errors import TivWriteError
from core.types import ReportDocument


def write_report(output_dir: Path, document: ReportDocument) -> Path:
    """Create or overwrite a report file.

    The optional header is written first, followed by one line per
    content entry, each terminated by a newline.

    Args:
        output_dir: Directory receiving the report.
        document: Rendered report.

    Returns:
        Path of the written file.

    Raises:
        TivWriteError: If the file cannot be written.
    """
    destination = output_dir / document.file_name
    try:
        _write_atomically(destination, render_report_text(document))
    except OSError as error:
        raise TivWriteError(
            f"Failed to write report {destination}: {error}. "
            "Check that the output directory exists and is writable."
        ) from error
    return destination


def render_report_text(document: ReportDocument) -> str:
    """Render full file content for a report."""
    lines = list(document.lines)
    if document.header is not None:
        lines.insert(0, document.header)
    return "".join(f"{line}{REPORT_LINE_TERMINATOR}" for line in lines)


def _write_atomically(destination: Path, text: str) -> None:
    """Write text to a sibling temp file, then move it into place.

    Args:
        destination: Final file path.
        text: Complete file content.
    """
    file_descriptor, temp_name = tempfile.mkstemp(
        prefix=f".{destination.name}.", suffix=".tmp", dir=destination.parent
    )
    temp_path = Path(temp_name)
    try:
        with os.fdopen(file_descriptor, "w", encoding=REPORT_TEXT_ENCODING, newline="") as handle:
            handle.write(text)
        os.replace(temp_path, destination)
    except BaseException:
        temp_path.unlink(missing_ok=True)
        raise
