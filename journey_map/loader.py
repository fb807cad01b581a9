"""Journey CSV reading layer (pure reads + validation)."""

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import List

import pandas as pd

from .errors import JourneyFormatError
from .models import Point, Trajectory

_LOG = logging.getLogger(__name__)

JOURNEY_COLUMNS = ["lat", "lon", "timestamp"]


def _assert_file_exists(path: Path) -> None:
    if not path.is_file():
        raise FileNotFoundError(f"Journey file not found: {path}")


def _has_header(frame: pd.DataFrame) -> bool:
    if frame.empty:
        return False
    first = [str(value).strip().lower() for value in frame.iloc[0].tolist()]
    return first == JOURNEY_COLUMNS


def _row_to_point(values: List[object], row_label: str) -> Point:
    if any(pd.isna(value) or str(value).strip() == "" for value in values):
        raise JourneyFormatError(f"Blank value in {row_label} of journey file")
    lat, lon, timestamp = (str(value).strip() for value in values)
    try:
        lat_f = float(lat)
        lon_f = float(lon)
        ts_f = float(timestamp)
    except ValueError as exc:
        raise JourneyFormatError(
            f"Non-numeric value in {row_label} of journey file: {values!r}"
        ) from exc
    if not all(math.isfinite(v) for v in (lat_f, lon_f, ts_f)):
        raise JourneyFormatError(
            f"Non-finite value in {row_label} of journey file: {values!r}"
        )
    if not -90.0 <= lat_f <= 90.0 or not -180.0 <= lon_f <= 180.0:
        raise JourneyFormatError(
            f"Coordinate out of range in {row_label}: lat={lat_f}, lon={lon_f}"
        )
    if not ts_f.is_integer():
        raise JourneyFormatError(
            f"Timestamp in {row_label} must be whole seconds, got {timestamp!r}"
        )
    return Point(lat_f, lon_f, int(ts_f))


def read_journey(path: str | Path) -> Trajectory:
    """Read ``lat,lon,timestamp`` rows into a trajectory.

    The file is headerless like the tracker export; a ``lat,lon,timestamp``
    header row is tolerated.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        JourneyFormatError: If any row has the wrong shape or non-numeric data.
    """

    csv_path = Path(path)
    _assert_file_exists(csv_path)
    try:
        frame = pd.read_csv(
            csv_path,
            header=None,
            dtype=str,
            skipinitialspace=True,
            keep_default_na=False,
        )
    except pd.errors.EmptyDataError:
        _LOG.warning("Journey file %s is empty", csv_path)
        return []
    except pd.errors.ParserError as exc:
        raise JourneyFormatError(f"Unable to parse journey file {csv_path}") from exc
    if frame.shape[1] != len(JOURNEY_COLUMNS):
        raise JourneyFormatError(
            f"Journey file {csv_path} has {frame.shape[1]} columns; "
            f"expected {len(JOURNEY_COLUMNS)} ({', '.join(JOURNEY_COLUMNS)})"
        )
    offset = 1
    if _has_header(frame):
        frame = frame.iloc[1:]
        offset = 2
    points = [
        _row_to_point(list(values), f"row {index + offset}")
        for index, values in enumerate(frame.itertuples(index=False, name=None))
    ]
    _LOG.info("Loaded %d points from %s", len(points), csv_path)
    return points


__all__ = ["JOURNEY_COLUMNS", "read_journey"]
