"""General utility helpers shared across modules."""

from __future__ import annotations

import math


def truncate(value: float, places: int = 2) -> float:
    """Floor ``value`` to ``places`` decimals (truncation, not rounding)."""

    factor = 10**places
    return math.floor(value * factor) / factor


def format_minutes(seconds: float) -> str:
    """Format seconds into a ``Xm Ys`` string."""

    mins, sec = divmod(int(seconds), 60)
    return f"{mins}m {sec}s"
