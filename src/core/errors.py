"""TIV report exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each pipeline stage raises a specific error type for debuggability.
"""

from __future__ import annotations


class TivError(Exception):
    """Base exception for all report pipeline failures."""


class TivConfigError(TivError):
    """Raised for invalid runtime configuration."""


class TivIngestError(TivError):
    """Raised for archive open and record parsing failures."""


class TivWriteError(TivError):
    """Raised when a report file cannot be written."""
