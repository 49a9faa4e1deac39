"""Unit tests for report number formatting."""

from __future__ import annotations

import pytest

from store.report_format import format_decimal


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (0.0, "0.00"),
        (360.0, "360.00"),
        (-50.0, "-50.00"),
        (1234567.891, "1234567.89"),
        (0.125, "0.13"),
        (2.675, "2.68"),
        (1.005, "1.01"),
        (0.015, "0.02"),
        (-0.125, "-0.13"),
        (1e20, "100000000000000000000.00"),
    ],
)
def test_format_decimal_renders_two_fraction_digits(value: float, expected: str) -> None:
    """Formatter should round half-up on the shortest decimal spelling."""
    assert format_decimal(value) == expected


def test_format_decimal_renders_non_finite_values() -> None:
    """Formatter should spell out NaN and infinities."""
    rendered = [format_decimal(float(raw)) for raw in ("nan", "inf", "-inf")]

    assert rendered == ["NaN", "Infinity", "-Infinity"]
