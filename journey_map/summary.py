"""Distance, duration and average speed for a filtered trajectory."""

from __future__ import annotations

import logging
from typing import Sequence

from .errors import EmptyTrajectoryError, InvalidTimeDeltaError
from .geo import haversine_distance_km, mps_to_mph
from .models import Point, Summary
from .utils import format_minutes, truncate

_LOG = logging.getLogger(__name__)


def summarize(trajectory: Sequence[Point]) -> Summary:
    """Aggregate a trajectory into total distance, elapsed time and speed.

    Figures are returned at full precision; use :meth:`Summary.truncated` or
    :func:`format_summary` for display.

    Raises:
        EmptyTrajectoryError: If fewer than two points are supplied.
        InvalidTimeDeltaError: If the last timestamp is not after the first.
    """

    if len(trajectory) < 2:
        raise EmptyTrajectoryError(
            f"A summary needs at least 2 points, got {len(trajectory)}"
        )
    total_km = 0.0
    previous = trajectory[0]
    for current in trajectory[1:]:
        total_km += haversine_distance_km(
            previous.lat, previous.lon, current.lat, current.lon
        )
        previous = current
    elapsed = float(trajectory[-1].timestamp - trajectory[0].timestamp)
    if elapsed <= 0:
        raise InvalidTimeDeltaError(
            f"Trajectory spans {elapsed:g}s; cannot compute an average speed"
        )
    avg_mph = mps_to_mph(total_km * 1000 / elapsed)
    _LOG.debug(
        "Summarised %d points: %.3f km in %s",
        len(trajectory),
        total_km,
        format_minutes(elapsed),
    )
    return Summary(
        total_distance_km=total_km,
        elapsed_seconds=elapsed,
        avg_speed_mph=avg_mph,
    )


def _display(value: float) -> str:
    text = f"{truncate(value):.2f}"
    return text.rstrip("0").rstrip(".")


def format_summary(summary: Summary) -> str:
    """Render the human readable journey report (figures truncated)."""

    return (
        f"You made a total distance of {_display(summary.total_distance_miles)} miles "
        f"in {_display(summary.elapsed_minutes)} minutes "
        f"with average speed of {_display(summary.avg_speed_mph)} mph."
    )


__all__ = ["format_summary", "summarize"]
