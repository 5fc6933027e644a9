"""Number parsing and rounding helpers shared by the converter and formatters."""

from __future__ import annotations

import math
from typing import Any


def parse_finite(value: Any) -> float | None:
    """Return *value* as a finite float, or ``None`` when it is not one.

    Accepts ints, floats and numeric strings (surrounding whitespace is
    ignored).  Booleans, ``None``, NaN and infinities are rejected.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from negative infinity.

    Python's ``round`` uses banker's rounding (``round(2.5) == 2``); page
    figures and links round halves up (``2.5 -> 3``).
    """
    return math.floor(value + 0.5)


def is_whole(value: float) -> bool:
    return float(value).is_integer()
