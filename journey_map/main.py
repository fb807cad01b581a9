"""Command line entry point: ``python -m journey_map <command>``."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Callable, Dict, Optional, Sequence

from .config import (
    DEFAULT_BOUNDING_BOX,
    DEFAULT_VIEWPORT,
    HTML_OUTPUT_FILE,
    JOURNEY_FILE,
    MAP_OUTPUT_FILE,
    SPEED_THRESHOLD_MPH,
    WEB_HOST,
    WEB_PORT,
    WORKBOOK_OUTPUT_FILE,
)
from .errors import JourneyMapError
from .export import write_journey_workbook
from .html_map import create_journey_map
from .processor import Journey, load_journey
from .projection import MercatorProjector, build_polyline
from .rendering import render_png
from .summary import format_summary, summarize


def _setup_logging(level: int = logging.INFO) -> None:
    if not logging.getLogger().hasHandlers():
        logging.basicConfig(
            level=level,
            format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
        )


def _default_projector() -> MercatorProjector:
    return MercatorProjector(DEFAULT_BOUNDING_BOX, DEFAULT_VIEWPORT)


def _cmd_summary(journey: Journey, args: argparse.Namespace) -> int:
    print(format_summary(summarize(journey.filtered)))
    return 0


def _cmd_render(journey: Journey, args: argparse.Namespace) -> int:
    output = args.output or Path(MAP_OUTPUT_FILE)
    polyline = build_polyline(journey.filtered, _default_projector())
    render_png(polyline, output, caption=args.caption)
    logging.info("Map image written to %s", output)
    return 0


def _cmd_html(journey: Journey, args: argparse.Namespace) -> int:
    output = args.output or Path(HTML_OUTPUT_FILE)
    create_journey_map(
        journey.raw,
        journey.filtered,
        journey.outlier_indices,
        output_html_path=output,
    )
    logging.info("Interactive map written to %s", output)
    return 0


def _cmd_export(journey: Journey, args: argparse.Namespace) -> int:
    output = args.output or Path(WORKBOOK_OUTPUT_FILE)
    write_journey_workbook(
        output,
        journey.filtered,
        summarize(journey.filtered),
        projector=_default_projector(),
    )
    return 0


_COMMANDS: Dict[str, Callable[[Journey, argparse.Namespace], int]] = {
    "summary": _cmd_summary,
    "render": _cmd_render,
    "html": _cmd_html,
    "export": _cmd_export,
}


def _build_parser() -> argparse.ArgumentParser:
    """Return the CLI argument parser."""

    parser = argparse.ArgumentParser(
        prog="journey-map",
        description=(
            "Clean a GPS journey of speed outliers, then report on it or draw it."
        ),
    )
    parser.add_argument(
        "--input",
        type=Path,
        default=Path(JOURNEY_FILE),
        help=f"Journey CSV with lat,lon,timestamp rows (default: {JOURNEY_FILE})",
    )
    parser.add_argument(
        "--threshold-mph",
        type=float,
        default=SPEED_THRESHOLD_MPH,
        help=f"Drop points reached faster than this (default: {SPEED_THRESHOLD_MPH:g})",
    )
    parser.add_argument("--verbose", "-v", action="store_true")
    sub = parser.add_subparsers(dest="command")
    sub.add_parser("summary", help="Print distance, duration and average speed")
    render = sub.add_parser("render", help="Draw the journey to a PNG image")
    render.add_argument("--output", type=Path)
    render.add_argument("--caption", help="Caption text (default: Unix time)")
    html = sub.add_parser("html", help="Write an interactive HTML map")
    html.add_argument("--output", type=Path)
    export = sub.add_parser("export", help="Write points and summary to Excel")
    export.add_argument("--output", type=Path)
    serve = sub.add_parser("serve", help="Serve the map and summary over HTTP")
    serve.add_argument("--host", default=WEB_HOST)
    serve.add_argument("--port", type=int, default=WEB_PORT)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    _setup_logging(logging.DEBUG if args.verbose else logging.INFO)
    command = args.command or "summary"

    if command == "serve":
        from .web import create_app  # Local import keeps Flask off the CLI path

        app = create_app(args.input, speed_threshold_mph=args.threshold_mph)
        app.run(host=args.host, port=args.port)
        return 0

    try:
        journey = load_journey(args.input, args.threshold_mph)
    except (JourneyMapError, FileNotFoundError) as exc:
        logging.error("Failed to load journey '%s': %s", args.input, exc)
        return 1

    try:
        return _COMMANDS[command](journey, args)
    except JourneyMapError as exc:
        logging.error("%s failed: %s", command, exc)
        return 1
