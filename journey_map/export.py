"""Excel export of filtered journeys and their summary."""

from __future__ import annotations

import logging
from os import PathLike
from pathlib import Path
from typing import Optional, Sequence

import numpy as np
import pandas as pd
from openpyxl.styles import Border, Font, PatternFill, Side
from openpyxl.worksheet.worksheet import Worksheet

from .errors import RenderError
from .geo import pairwise_distances_km
from .models import Point, Summary
from .projection import MercatorProjector
from .utils import truncate

POINTS_SHEET = "Points"
SUMMARY_SHEET = "Summary"

HEADER_FONT = Font(bold=True)
HEADER_FILL = PatternFill(patternType="solid", fgColor="FFD9E1F2")
HEADER_BORDER = Border(
    left=Side(style="thin", color="000000"),
    right=Side(style="thin", color="000000"),
    top=Side(style="thin", color="000000"),
    bottom=Side(style="thin", color="000000"),
)
AUTOSIZE_MAX_WIDTH = 40  # characters
AUTOSIZE_MIN_WIDTH = 6  # characters
AUTOSIZE_PADDING = 2

LOGGER = logging.getLogger(__name__)

PathInput = str | Path | PathLike[str]


def build_points_frame(
    points: Sequence[Point], projector: Optional[MercatorProjector] = None
) -> pd.DataFrame:
    """Tabulate points with the distance of the leg that reached each one."""

    legs = pairwise_distances_km(points)
    df = pd.DataFrame(
        {
            "Latitude": [pt.lat for pt in points],
            "Longitude": [pt.lon for pt in points],
            "Timestamp": [pt.timestamp for pt in points],
            "Leg Distance (km)": np.concatenate(([0.0], legs)) if points else [],
        }
    )
    if projector is not None:
        projected = projector.project_trajectory(points)
        df["X (px)"] = [pt.x for pt in projected]
        df["Y (px)"] = [pt.y for pt in projected]
    return df


def build_summary_frame(summary: Summary) -> pd.DataFrame:
    shown = summary.truncated()
    return pd.DataFrame(
        {
            "Total Distance (km)": [shown.total_distance_km],
            "Total Distance (miles)": [truncate(summary.total_distance_miles)],
            "Elapsed Time (sec)": [shown.elapsed_seconds],
            "Average Speed (mph)": [shown.avg_speed_mph],
        }
    )


def _style_header_row(ws: Worksheet, max_col: int) -> None:
    for col_idx in range(1, max_col + 1):
        cell = ws.cell(row=1, column=col_idx)
        cell.font = HEADER_FONT
        cell.fill = HEADER_FILL
        cell.border = HEADER_BORDER


def _autosize(ws: Worksheet) -> None:
    for col_cells in ws.columns:
        col_letter = getattr(col_cells[0], "column_letter", None)
        if not col_letter:
            continue
        max_len = max(
            (len(str(cell.value)) for cell in col_cells if cell.value is not None),
            default=0,
        )
        ws.column_dimensions[col_letter].width = min(
            AUTOSIZE_MAX_WIDTH, max(AUTOSIZE_MIN_WIDTH, max_len + AUTOSIZE_PADDING)
        )


def write_journey_workbook(
    filepath: PathInput,
    points: Sequence[Point],
    summary: Summary,
    *,
    projector: Optional[MercatorProjector] = None,
) -> Path:
    """Write the filtered points and the summary to an Excel workbook."""

    output_path = Path(filepath)
    sheets = (
        (POINTS_SHEET, build_points_frame(points, projector)),
        (SUMMARY_SHEET, build_summary_frame(summary)),
    )
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with pd.ExcelWriter(output_path, engine="openpyxl") as writer:
            for sheet_name, df in sheets:
                df.to_excel(writer, sheet_name=sheet_name, index=False)
                ws = writer.sheets[sheet_name]
                _style_header_row(ws, len(df.columns))
                _autosize(ws)
    except OSError as exc:
        raise RenderError(f"Cannot write workbook to {output_path}: {exc}") from exc
    LOGGER.info("Wrote %d points and summary to %s", len(points), output_path)
    return output_path


__all__ = [
    "POINTS_SHEET",
    "SUMMARY_SHEET",
    "build_points_frame",
    "build_summary_frame",
    "write_journey_workbook",
]
