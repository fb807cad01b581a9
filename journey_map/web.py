"""Flask app serving the journey map and report over HTTP."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from flask import Flask, Response, abort, jsonify
from flask.typing import ResponseReturnValue

from .config import (
    DEFAULT_BOUNDING_BOX,
    DEFAULT_VIEWPORT,
    JOURNEY_FILE,
    SPEED_THRESHOLD_MPH,
)
from .errors import (
    DomainError,
    EmptyTrajectoryError,
    InvalidTimeDeltaError,
    JourneyFormatError,
)
from .processor import Journey, load_journey
from .projection import MercatorProjector, build_polyline
from .rendering import render_png_bytes
from .summary import format_summary, summarize

_LOG = logging.getLogger(__name__)


def create_app(
    journey_path: Optional[str | Path] = None,
    *,
    speed_threshold_mph: float = SPEED_THRESHOLD_MPH,
    projector: Optional[MercatorProjector] = None,
) -> Flask:
    """Build the app; the journey file is re-read on every request."""

    app = Flask(__name__)
    path = Path(journey_path or JOURNEY_FILE)
    shared_projector = projector or MercatorProjector(
        DEFAULT_BOUNDING_BOX, DEFAULT_VIEWPORT
    )

    def _journey() -> Journey:
        try:
            return load_journey(path, speed_threshold_mph)
        except FileNotFoundError:
            _LOG.error("Journey file %s is missing", path)
            abort(500, description="Journey file is not readable")
        except JourneyFormatError as exc:
            _LOG.error("Journey file %s is malformed: %s", path, exc)
            abort(500, description="Journey file is malformed")

    @app.route("/map.png")
    def map_png() -> ResponseReturnValue:
        journey = _journey()
        try:
            polyline = build_polyline(journey.filtered, shared_projector)
        except (EmptyTrajectoryError, DomainError) as exc:
            abort(422, description=str(exc))
        return Response(render_png_bytes(polyline), mimetype="image/png")

    @app.route("/summary")
    def summary_text() -> ResponseReturnValue:
        journey = _journey()
        try:
            text = format_summary(summarize(journey.filtered))
        except (EmptyTrajectoryError, InvalidTimeDeltaError) as exc:
            abort(422, description=str(exc))
        return Response(text + "\n", mimetype="text/plain")

    @app.route("/points")
    def points_json() -> ResponseReturnValue:
        journey = _journey()
        try:
            projected = shared_projector.project_trajectory(journey.filtered)
        except DomainError as exc:
            abort(422, description=str(exc))
        width, height = shared_projector.viewport.size
        return jsonify(
            {
                "viewport": {"width": width, "height": height},
                "removed": journey.removed_count,
                "points": [[pt.x, pt.y] for pt in projected],
            }
        )

    return app


__all__ = ["create_app"]
