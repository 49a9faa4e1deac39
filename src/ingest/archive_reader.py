"""Policy record reader for zipped CSV exports.

This module loads policy rows from the first entry of a zip archive.
It normalizes CSV lines into typed policy records for aggregation.
"""

from __future__ import annotations

import io
import re
import zipfile
from pathlib import Path
from typing import Iterable

from core.constants import (
    ARCHIVE_TEXT_ENCODING,
    COUNTY_COLUMN_INDEX,
    CSV_DELIMITER,
    MIN_COLUMN_COUNT,
    TIV_2011_COLUMN_INDEX,
    TIV_2012_COLUMN_INDEX,
)
from core.errors import TivIngestError
from core.logging_config import get_logger
from core.types import PolicyRecord

_LOGGER = get_logger(__name__)

# Plain decimals or scientific notation, plus the NaN and Infinity literals.
_NUMBER_PATTERN = re.compile(
    r"[+-]?(?:NaN|Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)",
    re.ASCII,
)


def read_policy_records(archive_path: Path) -> list[PolicyRecord]:
    """Load policy records from a zipped CSV file.

    The first line of the archive entry is a header and is never parsed.

    Args:
        archive_path: Path to a zip archive whose first entry is the CSV.

    Returns:
        Policy records in file order.

    Raises:
        TivIngestError: If the archive cannot be read or a row is malformed.
    """
    try:
        with zipfile.ZipFile(archive_path) as archive:
            entry = _first_entry(archive, archive_path)
            with archive.open(entry) as raw_stream, io.TextIOWrapper(
                raw_stream, encoding=ARCHIVE_TEXT_ENCODING
            ) as text_stream:
                records = _parse_lines(archive_path, text_stream)
    except zipfile.BadZipFile as error:
        raise TivIngestError(
            f"Failed to open archive at {archive_path}: not a valid zip file. "
            "Provide the original compressed export."
        ) from error
    except UnicodeDecodeError as error:
        raise TivIngestError(
            f"Failed to decode archive entry in {archive_path}: {error.reason}. "
            f"The CSV must be {ARCHIVE_TEXT_ENCODING} encoded."
        ) from error
    except OSError as error:
        raise TivIngestError(
            f"Failed to read archive at {archive_path}: {error}. "
            "Check that the file exists and is readable."
        ) from error
    _LOGGER.info(
        "policy_records_loaded",
        archive_path=str(archive_path),
        record_count=len(records),
    )
    return records


def parse_policy_line(line: str) -> PolicyRecord:
    """Parse one CSV data line into a policy record.

    Lines are split on every comma; quoted fields are not supported.

    Args:
        line: Data line without its terminator.

    Returns:
        Parsed policy record.

    Raises:
        ValueError: If the line has too few columns or a non-numeric value.
    """
    columns = line.split(CSV_DELIMITER)
    if len(columns) < MIN_COLUMN_COUNT:
        raise ValueError(f"expected at least {MIN_COLUMN_COUNT} columns, got {len(columns)}")
    return PolicyRecord(
        county=columns[COUNTY_COLUMN_INDEX],
        tiv_2011=_parse_value(columns[TIV_2011_COLUMN_INDEX], TIV_2011_COLUMN_INDEX),
        tiv_2012=_parse_value(columns[TIV_2012_COLUMN_INDEX], TIV_2012_COLUMN_INDEX),
    )


def _first_entry(archive: zipfile.ZipFile, archive_path: Path) -> zipfile.ZipInfo:
    """Return the first entry of an archive.

    Raises:
        TivIngestError: If the archive is empty.
    """
    entries = archive.infolist()
    if not entries:
        raise TivIngestError(
            f"Archive at {archive_path} contains no entries. "
            "Provide an archive holding the policy CSV."
        )
    return entries[0]


def _parse_lines(archive_path: Path, lines: Iterable[str]) -> list[PolicyRecord]:
    """Parse data lines after the header.

    Args:
        archive_path: Archive path for error context.
        lines: Text lines including the header line.

    Returns:
        Parsed records.

    Raises:
        TivIngestError: If any data line is malformed.
    """
    records: list[PolicyRecord] = []
    for line_number, raw_line in enumerate(lines, 1):
        if line_number == 1:
            continue
        line = raw_line.rstrip("\r\n")
        try:
            records.append(parse_policy_line(line))
        except ValueError as error:
            raise TivIngestError(
                f"Failed to parse policy record at {archive_path}:{line_number}: "
                f"{error}. Fix the row and rerun."
            ) from error
    return records


def _parse_value(raw_value: str, column_index: int) -> float:
    """Parse a decimal cell, rejecting spellings outside the export format."""
    value = raw_value.strip()
    if not _NUMBER_PATTERN.fullmatch(value):
        raise ValueError(f"column {column_index} is not a number: '{raw_value}'")
    return float(value)
