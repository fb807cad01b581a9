"""Mercator projection of WGS84 coordinates onto a fixed pixel viewport.

The projector is fitted once to a bounding box: the longitude span is
stretched across the viewport width and latitudes are placed with the
Mercator formula, offset so that ``lat2`` lands on the bottom edge.

http://en.wikipedia.org/wiki/Mercator_projection
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Sequence

from .errors import DomainError, EmptyTrajectoryError, InvalidBoundsError
from .geo import degrees_to_radians
from .models import BoundingBox, Point, ProjectedPoint, Viewport

MAX_PROJECTABLE_LAT = 89.9


def is_projectable(lat: float, limit: float = MAX_PROJECTABLE_LAT) -> bool:
    """Return True when ``lat`` is finite and strictly inside ``±limit``."""

    return math.isfinite(lat) and abs(lat) < limit


def _mercator_log(lat_rad: float) -> float:
    sin_lat = math.sin(lat_rad)
    ratio = (1 + sin_lat) / (1 - sin_lat) if sin_lat != 1 else math.inf
    if not math.isfinite(ratio) or ratio <= 0:
        raise DomainError(
            f"Latitude {math.degrees(lat_rad):.6f} cannot be Mercator projected"
        )
    return math.log(ratio)


class MercatorProjector:
    """Converts ``(lat, lon)`` pairs into pixel coordinates.

    Derived constants are computed once in the constructor and only read
    afterwards, so a single instance can be shared between callers.

    Raises:
        InvalidBoundsError: If the box has no longitude span, the viewport is
            not positive, or ``lat2`` itself cannot be projected.
    """

    __slots__ = (
        "_bounds",
        "_viewport",
        "_lon_delta",
        "_degree_rad",
        "_world_width",
        "_offset_y",
    )

    def __init__(self, bounds: BoundingBox, viewport: Viewport) -> None:
        if bounds.lon2 == bounds.lon1:
            raise InvalidBoundsError(
                f"Bounding box longitude span is zero (lon1 == lon2 == {bounds.lon1})"
            )
        if viewport.width <= 0 or viewport.height <= 0:
            raise InvalidBoundsError(
                f"Viewport must be positive, got {viewport.width}x{viewport.height}"
            )
        if not is_projectable(bounds.lat2):
            raise InvalidBoundsError(
                f"Bounding box lat2={bounds.lat2} is outside the projectable range"
            )
        self._bounds = bounds
        self._viewport = viewport
        self._lon_delta = bounds.lon2 - bounds.lon1
        self._degree_rad = degrees_to_radians(bounds.lat2)
        self._world_width = (viewport.width / self._lon_delta) * 360 / (2 * math.pi)
        self._offset_y = self._world_width / 2 * _mercator_log(self._degree_rad)

    @property
    def bounds(self) -> BoundingBox:
        return self._bounds

    @property
    def viewport(self) -> Viewport:
        return self._viewport

    @property
    def lon_delta(self) -> float:
        return self._lon_delta

    @property
    def degree_rad(self) -> float:
        return self._degree_rad

    @property
    def world_width(self) -> float:
        return self._world_width

    @property
    def offset_y(self) -> float:
        return self._offset_y

    def project(self, lat: float, lon: float) -> ProjectedPoint:
        """Return the pixel position for a coordinate given in degrees.

        Raises:
            DomainError: If ``lat`` is not finite or within 0.1° of a pole,
                where the Mercator logarithm diverges. Callers check with
                :func:`is_projectable` or catch and skip the point.
        """

        if not is_projectable(lat):
            raise DomainError(f"Latitude {lat} is outside ±{MAX_PROJECTABLE_LAT}")
        x = (lon - self._bounds.lon1) * (self._viewport.width / self._lon_delta)
        lat_rad = degrees_to_radians(lat)
        y = self._viewport.height - (
            self._world_width / 2 * _mercator_log(lat_rad) - self._offset_y
        )
        return ProjectedPoint(x, y)

    def project_point(self, point: Point) -> ProjectedPoint:
        return self.project(point.lat, point.lon)

    def project_trajectory(self, trajectory: Sequence[Point]) -> List[ProjectedPoint]:
        """Project every point in order; a single bad latitude fails the call."""

        return [self.project(pt.lat, pt.lon) for pt in trajectory]

    def __repr__(self) -> str:
        return (
            f"MercatorProjector(bounds={self._bounds!r}, viewport={self._viewport!r})"
        )


@dataclass(frozen=True, slots=True)
class Polyline:
    """Projected trajectory handed to a renderer.

    ``start`` is the anchor the stroke begins at, ``path`` holds the
    remaining points in travel order.
    """

    start: ProjectedPoint
    path: List[ProjectedPoint]
    viewport: Viewport

    @property
    def points(self) -> List[ProjectedPoint]:
        return [self.start, *self.path]

    def to_svg_path(self) -> str:
        """Return ``M x,y L x,y ...`` drawing instructions."""

        start = f"M {self.start.x},{self.start.y}"
        if not self.path:
            return start
        rest = " ".join(f"{pt.x},{pt.y}" for pt in self.path)
        return f"{start} L {rest}"


def build_polyline(
    trajectory: Sequence[Point], projector: MercatorProjector
) -> Polyline:
    """Project a trajectory and split off its first point as the start anchor."""

    if not trajectory:
        raise EmptyTrajectoryError("Cannot build a polyline from an empty trajectory")
    projected = projector.project_trajectory(trajectory)
    return Polyline(start=projected[0], path=projected[1:], viewport=projector.viewport)


__all__ = [
    "MAX_PROJECTABLE_LAT",
    "MercatorProjector",
    "Polyline",
    "build_polyline",
    "is_projectable",
]
