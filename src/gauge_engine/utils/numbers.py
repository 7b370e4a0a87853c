"""
Numeric helpers shared by geometry and state code.

Rounding follows JavaScript ``Math.round`` (half rounds towards +inf), which
differs from Python's banker's rounding in ``round()``.
"""

from __future__ import annotations

import math
from typing import Any, Optional


def round_half_up(value: float) -> int:
    """Round to nearest integer, halves towards +infinity (2.5 → 3, -2.5 → -2)."""
    return int(math.floor(value + 0.5))


def round_to(value: float, places: int = 3) -> float:
    """Round to a fixed number of decimal places using round_half_up semantics."""
    factor = 10 ** places
    return math.floor(value * factor + 0.5) / factor


def coerce_number(value: Any) -> Optional[float]:
    """
    Coerce host input to float.

    Returns None for None, booleans, NaN/inf and anything float() rejects.
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def format_number(value: float) -> str:
    """
    Format a number the way it appears in path data.

    Integral values drop the fractional part (40.0 → "40", -0.0 → "0"),
    everything else uses the shortest float repr (21.716).
    """
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))
