"""Distinct county count aggregation."""

from __future__ import annotations

from typing import Iterable

from core.types import PolicyRecord


def count_distinct_counties(records: Iterable[PolicyRecord]) -> int:
    """Count distinct county names.

    Names compare by exact string equality, so case and surrounding
    whitespace are significant.

    Args:
        records: Policy records to evaluate.

    Returns:
        Number of distinct counties, zero for empty input.
    """
    return len({record.county for record in records})
