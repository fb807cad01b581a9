"""Dataclasses describing journey points, projection inputs and results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from .geo import km_to_miles
from .utils import truncate


@dataclass(frozen=True, slots=True)
class Point:
    """A single GPS fix: degrees for position, seconds for time."""

    lat: float
    lon: float
    timestamp: int


Trajectory = List[Point]


@dataclass(frozen=True, slots=True)
class BoundingBox:
    """Geographic rectangle the projection is fitted to."""

    lat1: float
    lon1: float
    lat2: float
    lon2: float

    @property
    def lon_span(self) -> float:
        return self.lon2 - self.lon1


@dataclass(frozen=True, slots=True)
class Viewport:
    """Target pixel canvas."""

    width: float
    height: float

    @property
    def size(self) -> Tuple[int, int]:
        """Integer canvas size for raster renderers."""

        return int(round(self.width)), int(round(self.height))


@dataclass(frozen=True, slots=True)
class ProjectedPoint:
    x: float
    y: float

    def as_tuple(self) -> Tuple[float, float]:
        return self.x, self.y


@dataclass(frozen=True, slots=True)
class Summary:
    """Aggregate distance and timing figures for a trajectory."""

    total_distance_km: float
    elapsed_seconds: float
    avg_speed_mph: float

    @property
    def total_distance_miles(self) -> float:
        return km_to_miles(self.total_distance_km)

    @property
    def elapsed_minutes(self) -> float:
        return self.elapsed_seconds / 60

    def truncated(self, places: int = 2) -> "Summary":
        """Return a copy with every figure floored to ``places`` decimals."""

        return Summary(
            total_distance_km=truncate(self.total_distance_km, places),
            elapsed_seconds=truncate(self.elapsed_seconds, places),
            avg_speed_mph=truncate(self.avg_speed_mph, places),
        )


__all__ = [
    "BoundingBox",
    "Point",
    "ProjectedPoint",
    "Summary",
    "Trajectory",
    "Viewport",
]
