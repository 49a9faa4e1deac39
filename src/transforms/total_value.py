"""Total insured value aggregation.

This module sums the 2012 insured value across all policy records.
"""

from __future__ import annotations

from typing import Iterable

from core.types import PolicyRecord


def sum_tiv_2012(records: Iterable[PolicyRecord]) -> float:
    """Sum 2012 insured values in input order.

    Args:
        records: Policy records to evaluate.

    Returns:
        Double-precision running total, ``0.0`` for empty input.
    """
    total = 0.0
    for record in records:
        total += record.tiv_2012
    return total
