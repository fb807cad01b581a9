"""Central configuration for the journey map tool.

All values are constants imported by the entry points (CLI and web app).
The core modules take these values as parameters instead of reading them,
so alternate regions can be tested without touching the environment.
Overrides are read from environment variables (optionally via a local `.env`).
"""

from __future__ import annotations

import os
from typing import Callable, TypeVar

from dotenv import load_dotenv

from .models import BoundingBox, Viewport

_T = TypeVar("_T")

_TRUE_WORDS = frozenset({"1", "true", "yes", "on"})
_FALSE_WORDS = frozenset({"0", "false", "no", "off"})


def _parse_flag(raw: str) -> bool:
    word = raw.strip().lower()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    raise ValueError(f"not a boolean flag: {raw!r}")


def _env(key: str, default: _T, parse: Callable[[str], _T]) -> _T:
    """Parse ``key`` from the environment, keeping ``default`` if unset or bad."""

    raw = os.getenv(key)
    if raw is None:
        return default
    try:
        return parse(raw)
    except ValueError:
        return default


# A .env in the working directory (or a parent) seeds the variables below.
load_dotenv()


# ---------------------------------------------------------------------------
# Input/Output
# ---------------------------------------------------------------------------
# Paths can be absolute or relative.
JOURNEY_FILE = os.getenv("JOURNEY_FILE", "journey.csv")
MAP_OUTPUT_FILE = os.getenv("MAP_OUTPUT_FILE", "map.png")
HTML_OUTPUT_FILE = os.getenv("HTML_OUTPUT_FILE", "map.html")
WORKBOOK_OUTPUT_FILE = os.getenv("WORKBOOK_OUTPUT_FILE", "journey.xlsx")


# ---------------------------------------------------------------------------
# Projection
# ---------------------------------------------------------------------------
# Reference rectangle the Mercator projection is fitted to (central London).
DEFAULT_BOUNDING_BOX = BoundingBox(
    lat1=_env("MAP_LAT1", 51.533122, float),
    lon1=_env("MAP_LON1", -0.172176, float),
    lat2=_env("MAP_LAT2", 51.492633, float),
    lon2=_env("MAP_LON2", -0.106215, float),
)

# Canvas size in pixels.
DEFAULT_VIEWPORT = Viewport(
    width=_env("MAP_WIDTH", 740.0, float),
    height=_env("MAP_HEIGHT", 740.0, float),
)


# ---------------------------------------------------------------------------
# Outlier filter
# ---------------------------------------------------------------------------
# Points reached faster than this (mph) are dropped before analysis.
SPEED_THRESHOLD_MPH = _env("SPEED_THRESHOLD_MPH", 40.0, float)


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------
MAP_BACKGROUND_COLOR = os.getenv("MAP_BACKGROUND_COLOR", "black")
MAP_STROKE_COLOR = os.getenv("MAP_STROKE_COLOR", "white")
MAP_STROKE_WIDTH = _env("MAP_STROKE_WIDTH", 2, int)
MAP_CAPTION_SIZE = _env("MAP_CAPTION_SIZE", 12, int)

# Draw the render timestamp in the top-left corner of PNG maps.
MAP_CAPTION_ENABLED = _env("MAP_CAPTION_ENABLED", True, _parse_flag)


# ---------------------------------------------------------------------------
# Web app
# ---------------------------------------------------------------------------
WEB_HOST = os.getenv("WEB_HOST", "127.0.0.1")
WEB_PORT = _env("WEB_PORT", 5000, int)
