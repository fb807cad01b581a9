"""Raster rendering of projected journeys.

Draws the polyline produced by :func:`journey_map.projection.build_polyline`
on a plain canvas the size of the projector viewport.
"""

from __future__ import annotations

import io
import logging
import time
from pathlib import Path
from typing import Optional, Union

from PIL import Image, ImageDraw, ImageFont

from .config import (
    MAP_BACKGROUND_COLOR,
    MAP_CAPTION_ENABLED,
    MAP_CAPTION_SIZE,
    MAP_STROKE_COLOR,
    MAP_STROKE_WIDTH,
)
from .errors import RenderError
from .projection import Polyline

_LOG = logging.getLogger(__name__)

PathLike = Union[str, Path]

# Top-left corner of the caption box; puts the baseline close to y=20.
_CAPTION_POSITION = (10, 8)
_FONT_CANDIDATES = ("DejaVuSans.ttf", "Arial.ttf", "Helvetica.ttf")

_font_cache: dict[int, ImageFont.ImageFont | ImageFont.FreeTypeFont] = {}


def _get_font(size: int) -> ImageFont.ImageFont | ImageFont.FreeTypeFont:
    """Return a cached caption font, falling back to Pillow's bitmap font."""

    if size in _font_cache:
        return _font_cache[size]
    font: ImageFont.ImageFont | ImageFont.FreeTypeFont | None = None
    for name in _FONT_CANDIDATES:
        try:
            font = ImageFont.truetype(name, size)
            break
        except OSError:
            continue
    if font is None:
        font = ImageFont.load_default()
    _font_cache[size] = font
    return font


def draw_polyline(polyline: Polyline, *, caption: Optional[str] = None) -> Image.Image:
    """Return an RGB image with the journey stroked from its start anchor.

    Args:
        polyline: Projected journey; its viewport sets the canvas size.
        caption: Text drawn in the top-left corner. Defaults to the current
            Unix time when captions are enabled.
    """

    image = Image.new("RGB", polyline.viewport.size, MAP_BACKGROUND_COLOR)
    draw = ImageDraw.Draw(image)
    if caption is None and MAP_CAPTION_ENABLED:
        caption = str(int(time.time()))
    if caption:
        draw.text(
            _CAPTION_POSITION,
            caption,
            fill=MAP_STROKE_COLOR,
            font=_get_font(MAP_CAPTION_SIZE),
        )
    coordinates = [pt.as_tuple() for pt in polyline.points]
    if len(coordinates) >= 2:
        draw.line(
            coordinates,
            fill=MAP_STROKE_COLOR,
            width=MAP_STROKE_WIDTH,
            joint="curve",
        )
    else:
        # A single fix still marks where the journey started.
        x, y = coordinates[0]
        radius = max(MAP_STROKE_WIDTH, 1)
        draw.ellipse(
            (x - radius, y - radius, x + radius, y + radius), fill=MAP_STROKE_COLOR
        )
    return image


def render_png_bytes(polyline: Polyline, *, caption: Optional[str] = None) -> bytes:
    """Return the journey map encoded as PNG."""

    buffer = io.BytesIO()
    draw_polyline(polyline, caption=caption).save(buffer, format="PNG")
    return buffer.getvalue()


def render_png(
    polyline: Polyline, output: PathLike, *, caption: Optional[str] = None
) -> Path:
    """Write the journey map to ``output`` and return the resolved path.

    Raises:
        RenderError: If the file cannot be written.
    """

    output_path = Path(output)
    image = draw_polyline(polyline, caption=caption)
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        image.save(output_path, format="PNG")
    except OSError as exc:
        raise RenderError(f"Cannot write map image to {output_path}: {exc}") from exc
    _LOG.info(
        "Rendered %d points to %s (%dx%d)",
        len(polyline.path) + 1,
        output_path,
        *polyline.viewport.size,
    )
    return output_path


__all__ = ["draw_polyline", "render_png", "render_png_bytes"]
