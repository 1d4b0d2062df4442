"""Human-readable formatting of durations."""

from __future__ import annotations

import math
from datetime import timedelta

__all__ = ["seconds_to_float", "seconds_to_string"]

_MINUTE = 60.0
_HOUR = _MINUTE * 60
_DAY = _HOUR * 24
_WEEK = _DAY * 7
_YEAR = _DAY * 365.25


def seconds_to_float(duration: timedelta | float) -> float:
    """Return a duration in seconds as a float."""
    if isinstance(duration, timedelta):
        return duration.total_seconds()
    return float(duration)


def seconds_to_string(secs: float, digits: int = 3) -> str:
    """Format seconds with a suitable unit and ``digits`` significant digits.

    A negative ``digits`` pads the text so that decimal points line up.
    """
    result = "~zero time"
    if digits == 0:
        digits = 3
    elif digits == 1:
        digits = 2
    elif digits == -1:
        digits = -2

    if not secs <= 0:  # also true for NaN
        duration = float(secs)
        unit = " "
        if duration < 100:
            unit = " s"
        elif duration < _MINUTE * 100:
            unit, duration = " min", duration / _MINUTE
        elif duration < _DAY:
            unit, duration = " h", duration / _HOUR
        elif duration < _DAY * 30:
            unit, duration = " days", duration / _DAY
        elif duration < _YEAR:
            unit, duration = " weeks", duration / _WEEK
        elif math.isnan(duration):
            pass
        elif math.isinf(duration):
            unit = "  time"
        else:
            unit, duration = " years", duration / _YEAR

        result = f"{duration:.{abs(digits)}g}"
        result += unit if result[-1].isdigit() else unit[1:]

    if digits < 0:
        def at(i: int) -> str:
            return result[i] if i < len(result) else ""

        ins = int(digits < -2) + int(at(1) == ".") - int(at(3) == ".")
        result = " " * max(ins, 0) + result
        result += " " * max(13 - digits - len(result), 0)
    return result