"""GPS journey cleaning, summary and Mercator map projection."""

from .errors import (
    DomainError,
    EmptyTrajectoryError,
    InvalidBoundsError,
    InvalidTimeDeltaError,
    JourneyMapError,
)
from .filtering import filter_outliers
from .geo import haversine_distance_km
from .models import BoundingBox, Point, ProjectedPoint, Summary, Viewport
from .projection import MercatorProjector, build_polyline
from .summary import format_summary, summarize

__all__ = [
    "BoundingBox",
    "DomainError",
    "EmptyTrajectoryError",
    "InvalidBoundsError",
    "InvalidTimeDeltaError",
    "JourneyMapError",
    "MercatorProjector",
    "Point",
    "ProjectedPoint",
    "Summary",
    "Viewport",
    "build_polyline",
    "filter_outliers",
    "format_summary",
    "haversine_distance_km",
    "summarize",
]
