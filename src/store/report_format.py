"""Locale-independent number formatting for report files."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Context, Decimal

from core.constants import DECIMAL_PLACES

_QUANTUM = Decimal(1).scaleb(-DECIMAL_PLACES)
# Wide enough for the integer part of any finite double.
_CONTEXT = Context(prec=400)


def format_decimal(value: float) -> str:
    """Format a float with exactly two fractional digits.

    The separator is always ``.`` whatever the host locale, so values
    never collide with the comma delimiter of report lines. Rounding is
    half-up on the shortest decimal spelling of ``value``, so
    ``2.675`` renders as ``"2.68"``.

    Args:
        value: Number to render.

    Returns:
        Fixed-point string such as ``"1234.50"`` or ``"-0.25"``.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    rounded = Decimal(repr(value)).quantize(_QUANTUM, rounding=ROUND_HALF_UP, context=_CONTEXT)
    return format(rounded, "f")
