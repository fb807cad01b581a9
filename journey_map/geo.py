"""Great-circle distance and unit conversion helpers.

All functions are pure. Distances use a spherical Earth of mean radius
6371.01 km, which is accurate to well under a percent for the short legs a
GPS trace is made of.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Sequence

import numpy as np
from numpy.typing import NDArray

from .errors import InvalidTimeDeltaError

if TYPE_CHECKING:  # pragma: no cover - type checking only
    from .models import Point

EARTH_RADIUS_KM = 6371.01
MPS_TO_MPH = 2.23693629
KM_TO_MILES = 0.621371192

DistanceArray = NDArray[np.float64]


def degrees_to_radians(value: float) -> float:
    return value * math.pi / 180


def radians_to_degrees(value: float) -> float:
    return value * 180 / math.pi


def mps_to_mph(value: float) -> float:
    """Convert metres per second to miles per hour."""

    return value * MPS_TO_MPH


def km_to_miles(value: float) -> float:
    return value * KM_TO_MILES


def haversine_distance_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Return the orthodromic distance in kilometres between two coordinates.

    Inputs are in degrees. The haversine term is clamped to ``[0, 1]`` so that
    rounding on near-antipodal or identical points cannot push ``sqrt`` out of
    its domain.
    """

    sin = math.sin
    cos = math.cos
    atan2 = math.atan2
    sqrt = math.sqrt
    lat1_rad = degrees_to_radians(lat1)
    lon1_rad = degrees_to_radians(lon1)
    lat2_rad = degrees_to_radians(lat2)
    lon2_rad = degrees_to_radians(lon2)
    delta_lat = lat2_rad - lat1_rad
    delta_lon = lon2_rad - lon1_rad
    sin_half_lat = sin(delta_lat / 2.0)
    sin_half_lon = sin(delta_lon / 2.0)
    a = sin_half_lat**2 + cos(lat1_rad) * cos(lat2_rad) * sin_half_lon**2
    a = min(max(a, 0.0), 1.0)
    c = 2.0 * atan2(sqrt(a), sqrt(1.0 - a))
    return EARTH_RADIUS_KM * c


def segment_speed_mph(first: "Point", second: "Point") -> float:
    """Return the travel speed implied by two consecutive points.

    Raises:
        InvalidTimeDeltaError: If ``second`` is not strictly later than ``first``.
    """

    delta_s = second.timestamp - first.timestamp
    if delta_s <= 0:
        raise InvalidTimeDeltaError(
            f"Non-positive time delta {delta_s}s between timestamps "
            f"{first.timestamp} and {second.timestamp}"
        )
    distance_m = (
        haversine_distance_km(first.lat, first.lon, second.lat, second.lon) * 1000
    )
    return mps_to_mph(distance_m / delta_s)


def pairwise_distances_km(points: Sequence["Point"]) -> DistanceArray:
    """Vectorised leg distances between consecutive points (length ``n - 1``)."""

    if len(points) < 2:
        return np.empty(0, dtype=float)
    lats = np.radians(np.asarray([pt.lat for pt in points], dtype=float))
    lons = np.radians(np.asarray([pt.lon for pt in points], dtype=float))
    delta_lat = np.diff(lats)
    delta_lon = np.diff(lons)
    a = (
        np.sin(delta_lat / 2.0) ** 2
        + np.cos(lats[:-1]) * np.cos(lats[1:]) * np.sin(delta_lon / 2.0) ** 2
    )
    a = np.clip(a, 0.0, 1.0)
    c = 2.0 * np.arctan2(np.sqrt(a), np.sqrt(1.0 - a))
    return EARTH_RADIUS_KM * c


__all__ = [
    "EARTH_RADIUS_KM",
    "KM_TO_MILES",
    "MPS_TO_MPH",
    "degrees_to_radians",
    "haversine_distance_km",
    "km_to_miles",
    "mps_to_mph",
    "pairwise_distances_km",
    "radians_to_degrees",
    "segment_speed_mph",
]
