"""Core constants used across report modules.

This module centralizes file names, column positions, and labels.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

from pathlib import Path

ARCHIVE_FILE_PATH = Path("FL_insurance.csv.zip")
DEFAULT_OUTPUT_DIR = Path(".")
ARCHIVE_TEXT_ENCODING = "utf-8"
REPORT_TEXT_ENCODING = "utf-8"
REPORT_LINE_TERMINATOR = "\n"
CSV_DELIMITER = ","
COUNTY_COLUMN_INDEX = 2
TIV_2011_COLUMN_INDEX = 7
TIV_2012_COLUMN_INDEX = 8
MIN_COLUMN_COUNT = TIV_2012_COLUMN_INDEX + 1
COUNT_REPORT_FILE_NAME = "count.txt"
TIV_2012_REPORT_FILE_NAME = "tiv2012.txt"
MOST_VALUABLE_REPORT_FILE_NAME = "most_valuable.txt"
# "country" is the historical label consumers of the file expect.
MOST_VALUABLE_REPORT_HEADER = "country,value"
DEFAULT_TOP_COUNTY_LIMIT = 10
DECIMAL_PLACES = 2
SUCCESS_MESSAGE = "Report files generated."
