"""Tests for the Excel workbook export."""

from __future__ import annotations

from pathlib import Path

import pandas as pd
import pytest
from openpyxl import load_workbook

from journey_map.export import (
    POINTS_SHEET,
    SUMMARY_SHEET,
    build_points_frame,
    write_journey_workbook,
)
from journey_map.errors import RenderError
from journey_map.filtering import filter_outliers
from journey_map.summary import summarize


def test_points_frame_with_projection(london_journey, projector) -> None:
    filtered = filter_outliers(london_journey, 40)
    df = build_points_frame(filtered, projector)
    assert list(df.columns) == [
        "Latitude",
        "Longitude",
        "Timestamp",
        "Leg Distance (km)",
        "X (px)",
        "Y (px)",
    ]
    assert len(df) == len(filtered)
    assert df["Leg Distance (km)"].iloc[0] == 0.0
    assert (df["Leg Distance (km)"].iloc[1:] > 0).all()
    assert df["X (px)"].between(0, 740).all()


def test_points_frame_empty() -> None:
    df = build_points_frame([])
    assert df.empty
    assert "X (px)" not in df.columns


def test_write_workbook(london_journey, projector, tmp_path: Path) -> None:
    filtered = filter_outliers(london_journey, 40)
    summary = summarize(filtered)
    output = write_journey_workbook(
        tmp_path / "out" / "journey.xlsx", filtered, summary, projector=projector
    )

    sheets = pd.read_excel(output, sheet_name=None)
    assert set(sheets) == {POINTS_SHEET, SUMMARY_SHEET}
    assert len(sheets[POINTS_SHEET]) == len(filtered)
    summary_row = sheets[SUMMARY_SHEET].iloc[0]
    assert summary_row["Elapsed Time (sec)"] == 270
    assert summary_row["Total Distance (km)"] == pytest.approx(
        summary.total_distance_km, abs=0.01
    )
    assert summary_row["Total Distance (km)"] <= summary.total_distance_km

    workbook = load_workbook(output)
    assert workbook[POINTS_SHEET]["A1"].font.bold


def test_unwritable_target_raises(london_journey, tmp_path: Path) -> None:
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("", encoding="utf-8")
    filtered = filter_outliers(london_journey, 40)
    with pytest.raises(RenderError):
        write_journey_workbook(blocker / "journey.xlsx", filtered, summarize(filtered))
