"""Tests for the Mercator projector and the render-path polyline."""

from __future__ import annotations

import math

import pytest

from journey_map.errors import DomainError, EmptyTrajectoryError, InvalidBoundsError
from journey_map.models import BoundingBox, Point, ProjectedPoint, Viewport
from journey_map.projection import (
    MAX_PROJECTABLE_LAT,
    MercatorProjector,
    build_polyline,
    is_projectable,
)


def test_cached_constants(projector: MercatorProjector, london_bounds: BoundingBox) -> None:
    lon_delta = london_bounds.lon2 - london_bounds.lon1
    degree = london_bounds.lat2 * math.pi / 180
    world_width = (740 / lon_delta) * 360 / (2 * math.pi)
    offset_y = world_width / 2 * math.log((1 + math.sin(degree)) / (1 - math.sin(degree)))

    assert projector.lon_delta == pytest.approx(lon_delta)
    assert projector.degree_rad == pytest.approx(degree)
    assert projector.world_width == pytest.approx(world_width)
    assert projector.offset_y == pytest.approx(offset_y)


def test_box_corners_land_on_viewport_edges(
    projector: MercatorProjector, london_bounds: BoundingBox
) -> None:
    top_left = projector.project(london_bounds.lat1, london_bounds.lon1)
    bottom_right = projector.project(london_bounds.lat2, london_bounds.lon2)

    assert top_left.x == pytest.approx(0.0, abs=1e-9)
    assert bottom_right.x == pytest.approx(740.0)
    # lat2 sits exactly on the bottom edge because the offset cancels.
    assert bottom_right.y == pytest.approx(740.0, abs=1e-9)
    # lat1 is further north, so it is drawn near the top.
    assert 0 <= top_left.y < 50


def test_mercator_stretches_latitude(projector: MercatorProjector) -> None:
    lat, lon = 51.51, -0.14
    base = projector.project(lat, lon)
    north = projector.project(lat + 0.001, lon)
    east = projector.project(lat, lon + 0.001)

    px_per_deg_lon = east.x - base.x
    px_per_deg_lat = base.y - north.y
    assert north.y < base.y
    assert px_per_deg_lat / px_per_deg_lon == pytest.approx(
        1 / math.cos(math.radians(lat)), rel=1e-3
    )


def test_project_point_and_trajectory(projector: MercatorProjector, london_journey) -> None:
    projected = projector.project_trajectory(london_journey)
    assert len(projected) == len(london_journey)
    assert projected[0] == projector.project_point(london_journey[0])
    assert all(isinstance(pt, ProjectedPoint) for pt in projected)


def test_zero_longitude_span_rejected(viewport: Viewport) -> None:
    with pytest.raises(InvalidBoundsError):
        MercatorProjector(BoundingBox(51.5, -0.1, 51.4, -0.1), viewport)


@pytest.mark.parametrize("width, height", [(0, 740), (-10, 740), (740, 0)])
def test_non_positive_viewport_rejected(london_bounds, width, height) -> None:
    with pytest.raises(InvalidBoundsError):
        MercatorProjector(london_bounds, Viewport(width, height))


def test_polar_reference_latitude_rejected(viewport: Viewport) -> None:
    with pytest.raises(InvalidBoundsError):
        MercatorProjector(BoundingBox(80.0, 0.0, 90.0, 1.0), viewport)


@pytest.mark.parametrize("lat", [90.0, -90.0, 89.95, math.nan, math.inf])
def test_unprojectable_latitudes(projector: MercatorProjector, lat: float) -> None:
    assert not is_projectable(lat)
    with pytest.raises(DomainError):
        projector.project(lat, 0.0)


def test_projectable_limit_is_strict() -> None:
    assert is_projectable(MAX_PROJECTABLE_LAT - 1e-6)
    assert not is_projectable(MAX_PROJECTABLE_LAT)


def test_domain_error_fails_whole_trajectory(projector: MercatorProjector) -> None:
    points = [Point(51.5, -0.15, 0), Point(90.0, -0.15, 10)]
    with pytest.raises(DomainError):
        projector.project_trajectory(points)


def test_projector_is_read_only(projector: MercatorProjector) -> None:
    with pytest.raises(AttributeError):
        projector.offset_y = 0.0  # type: ignore[misc]


def test_build_polyline_sets_aside_start(projector: MercatorProjector, london_journey) -> None:
    polyline = build_polyline(london_journey, projector)
    projected = projector.project_trajectory(london_journey)

    assert polyline.start == projected[0]
    assert polyline.path == projected[1:]
    assert polyline.points == projected
    assert polyline.viewport == projector.viewport


def test_polyline_svg_path() -> None:
    bounds = BoundingBox(lat1=1.0, lon1=0.0, lat2=0.0, lon2=1.0)
    projector = MercatorProjector(bounds, Viewport(100, 100))
    polyline = build_polyline([Point(0.0, 0.0, 0), Point(0.0, 0.5, 10)], projector)
    assert polyline.to_svg_path() == "M 0.0,100.0 L 50.0,100.0"


def test_single_point_polyline(projector: MercatorProjector) -> None:
    polyline = build_polyline([Point(51.51, -0.14, 0)], projector)
    assert polyline.path == []
    assert polyline.to_svg_path().startswith("M ")


def test_build_polyline_rejects_empty(projector: MercatorProjector) -> None:
    with pytest.raises(EmptyTrajectoryError):
        build_polyline([], projector)
