"""Speed-based outlier removal for time-ordered GPS traces."""

from __future__ import annotations

import logging
import math
from typing import Iterable, List, Sequence, Tuple

from .errors import InvalidTimeDeltaError
from .geo import segment_speed_mph
from .models import Point, Trajectory

_LOG = logging.getLogger(__name__)

DEFAULT_SPEED_THRESHOLD_MPH = 40.0


def find_outlier_indices(
    trajectory: Sequence[Point],
    speed_threshold_mph: float = DEFAULT_SPEED_THRESHOLD_MPH,
) -> List[int]:
    """Return indices of points reached faster than ``speed_threshold_mph``.

    Every pair ``(p[i-1], p[i])`` is compared against the original previous
    point, including when that point has itself been flagged; a flagged
    point is not dropped until the scan finishes. A pair with a zero or
    negative time delta, or a speed that is not finite, flags ``i``
    regardless of distance.
    """

    if speed_threshold_mph < 0:
        raise ValueError("speed_threshold_mph must not be negative")
    flagged: List[int] = []
    for index in range(1, len(trajectory)):
        previous = trajectory[index - 1]
        current = trajectory[index]
        try:
            speed = segment_speed_mph(previous, current)
        except InvalidTimeDeltaError:
            _LOG.debug(
                "Outlier at index %d: non-positive time delta (%s -> %s)",
                index,
                previous.timestamp,
                current.timestamp,
            )
            flagged.append(index)
            continue
        if not math.isfinite(speed) or speed > speed_threshold_mph:
            _LOG.debug("Outlier at index %d: %.2f mph", index, speed)
            flagged.append(index)
    return flagged


def drop_indices(trajectory: Sequence[Point], indices: Iterable[int]) -> Trajectory:
    """Return a new trajectory without the points at ``indices``, order kept."""

    removed = set(indices)
    return [pt for index, pt in enumerate(trajectory) if index not in removed]


def split_outliers(
    trajectory: Sequence[Point],
    speed_threshold_mph: float = DEFAULT_SPEED_THRESHOLD_MPH,
) -> Tuple[Trajectory, List[int]]:
    """Return the kept points and the indices that were dropped."""

    flagged = find_outlier_indices(trajectory, speed_threshold_mph)
    kept = drop_indices(trajectory, flagged)
    if flagged:
        _LOG.info(
            "Removed %d of %d points above %.1f mph",
            len(flagged),
            len(trajectory),
            speed_threshold_mph,
        )
    return kept, flagged


def filter_outliers(
    trajectory: Sequence[Point],
    speed_threshold_mph: float = DEFAULT_SPEED_THRESHOLD_MPH,
) -> Trajectory:
    """Return a new trajectory without speed outliers.

    Args:
        trajectory: Points in temporal order.
        speed_threshold_mph: Highest plausible speed; pairs strictly above it
            mark their later point for removal.

    Returns:
        A new list preserving the relative order of the kept points. The
        input sequence is left untouched.
    """

    kept, _ = split_outliers(trajectory, speed_threshold_mph)
    return kept


__all__ = [
    "DEFAULT_SPEED_THRESHOLD_MPH",
    "drop_indices",
    "filter_outliers",
    "find_outlier_indices",
    "split_outliers",
]
