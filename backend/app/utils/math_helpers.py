"""Math helpers — rounding and number formatting. No engine imports."""

from __future__ import annotations

import math

# Two decimals is the precision map consumers expect from path data.
PATH_PRECISION = 2

# Larger magnitudes overflow once scaled for rounding
MAX_COORDINATE = 1e300


def round_half_up(value: float, digits: int = PATH_PRECISION) -> float:
    """Round to ``digits`` decimals with halves going up: 0.125 → 0.13, -0.125 → -0.12.

    Applying it twice gives the same result as applying it once.
    """
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


def format_number(value: float) -> str:
    """Shortest text that reads back as ``value``; integral values drop the ``.0``."""
    value = float(value)
    if value.is_integer() and abs(value) < 1e15:
        return str(int(value))
    return repr(value)
