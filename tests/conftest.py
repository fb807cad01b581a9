"""Global pytest fixtures & helpers.

Adds project root to path and provides reusable journeys, projectors and
CSV files so the individual test modules stay short.
"""
from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Callable, List, Sequence

import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from journey_map.models import BoundingBox, Point, Viewport
from journey_map.projection import MercatorProjector


# --- Factory helpers -------------------------------------------------
def make_equator_track(count: int, *, step_deg: float = 0.0001, step_s: int = 10) -> List[Point]:
    """Walk east along the equator at roughly 2.5 mph."""

    return [Point(0.0, idx * step_deg, idx * step_s) for idx in range(count)]


def make_london_journey() -> List[Point]:
    """Ten fixes heading south-east at ~6 mph with one GPS spike at index 4."""

    points = [
        Point(51.5200 - idx * 0.0005, -0.1600 + idx * 0.0008, 1_400_000_000 + idx * 30)
        for idx in range(10)
    ]
    spike = points[4]
    points[4] = Point(spike.lat + 0.05, spike.lon, spike.timestamp)
    return points


def write_csv(path: Path, rows: Sequence[Sequence[object]], header: bool = False) -> Path:
    lines = ["lat,lon,timestamp"] if header else []
    lines.extend(",".join(str(value) for value in row) for row in rows)
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


# --- Fixtures --------------------------------------------------------
@pytest.fixture
def london_bounds() -> BoundingBox:
    return BoundingBox(lat1=51.533122, lon1=-0.172176, lat2=51.492633, lon2=-0.106215)


@pytest.fixture
def viewport() -> Viewport:
    return Viewport(width=740, height=740)


@pytest.fixture
def projector(london_bounds: BoundingBox, viewport: Viewport) -> MercatorProjector:
    return MercatorProjector(london_bounds, viewport)


@pytest.fixture
def equator_track() -> List[Point]:
    return make_equator_track(10)


@pytest.fixture
def london_journey() -> List[Point]:
    return make_london_journey()


@pytest.fixture
def journey_csv(tmp_path: Path, london_journey: List[Point]) -> Path:
    rows = [(pt.lat, pt.lon, pt.timestamp) for pt in london_journey]
    return write_csv(tmp_path / "journey.csv", rows)


@pytest.fixture
def csv_writer(tmp_path: Path) -> Callable[..., Path]:
    def _write(rows: Sequence[Sequence[object]], name: str = "journey.csv", header: bool = False) -> Path:
        return write_csv(tmp_path / name, rows, header=header)

    return _write
