"""Interactive map of a journey with its removed outliers."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

import folium  # Using folium to build an interactive Leaflet map.

from .errors import EmptyTrajectoryError, RenderError
from .models import Point

LatLon = Tuple[float, float]
PathLike = Union[str, Path]

_JOURNEY_COLOR = "#2c7bb6"
_OUTLIER_COLOR = "#d73027"
_START_COLOR = "#1a9641"


def _latlon(points: Sequence[Point]) -> List[LatLon]:
    return [(pt.lat, pt.lon) for pt in points]


def create_journey_map(
    raw: Sequence[Point],
    filtered: Sequence[Point],
    outlier_indices: Sequence[int] = (),
    *,
    output_html_path: Optional[PathLike] = None,
) -> folium.Map:
    """Create an interactive map of the filtered journey.

    Args:
        raw: Trajectory as loaded, used to locate the outliers.
        filtered: Trajectory after outlier removal; drawn as the route.
        outlier_indices: Indices into ``raw`` that the filter removed.
        output_html_path: Optional path to persist the map as an HTML file.

    Returns:
        A :class:`folium.Map` instance containing the overlay.

    Raises:
        EmptyTrajectoryError: If there is nothing left to draw.
        IndexError: If an outlier index does not belong to ``raw``.
    """

    if not filtered:
        raise EmptyTrajectoryError("Cannot map a journey without points")
    route = _latlon(filtered)
    folium_map = folium.Map(location=route[0], zoom_start=14, control_scale=True)
    if len(route) >= 2:
        folium.PolyLine(
            route,
            color=_JOURNEY_COLOR,
            weight=4,
            opacity=0.8,
            tooltip="Journey",
        ).add_to(folium_map)
    folium.CircleMarker(
        location=route[0],
        radius=6,
        color=_START_COLOR,
        fill=True,
        fill_color=_START_COLOR,
        tooltip="Start",
    ).add_to(folium_map)

    for index in outlier_indices:
        point = raw[index]
        popup = folium.Popup(
            html=f"<strong>Outlier</strong> sample {index} (t={point.timestamp})",
            max_width=300,
        )
        folium.CircleMarker(
            location=(point.lat, point.lon),
            radius=5,
            color=_OUTLIER_COLOR,
            fill=True,
            fill_color=_OUTLIER_COLOR,
            tooltip="Removed outlier",
            popup=popup,
        ).add_to(folium_map)

    folium_map.fit_bounds([list(coord) for coord in route])

    if output_html_path is not None:
        output_path = Path(output_html_path)
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            folium_map.save(str(output_path))
        except OSError as exc:
            raise RenderError(f"Cannot write HTML map to {output_path}: {exc}") from exc

    return folium_map


__all__ = ["create_journey_map"]
