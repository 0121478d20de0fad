"""
ReefHeat - Folium Region Map

Renders a static Leaflet map of the four GBR management areas with:
  - transparent polygons outlined in black
  - a right-aligned text label per region showing the 12 / 8 / 4 week SST
    and the MMM threshold
Panning and zooming are disabled so the labels keep their placement.
"""

import folium
import geopandas as gpd
import numpy as np
from typing import Sequence, Tuple

from config.constants import (
    DISPLAY_CRS,
    LABEL_FONT_SIZE,
    MATRIX_WINDOWS,
    MMM_THRESHOLDS,
    REGION_LABEL_OFFSETS,
    REGION_ORDER,
    REGION_STYLE,
)

LABEL_SIZE = (190, 80)


def format_region_label(window_values: Sequence[float], threshold: float) -> str:
    """
    Label text for one region.

    ``window_values`` is one exceedance-matrix row: [12-week, 8-week, 4-week].
    """
    lines = [
        f"{weeks} weeks: {round(float(v), 1)}°C"
        for weeks, v in zip(MATRIX_WINDOWS, window_values)
    ]
    lines.append(f"Threshold: {round(threshold, 1)}°C")
    return "\n".join(lines)


def build_region_map(
    regions: gpd.GeoDataFrame,
    exceedance_matrix: np.ndarray,
    offsets: Sequence[Tuple[int, int]] = REGION_LABEL_OFFSETS,
    zoom: int = 5,
) -> folium.Map:
    """
    Build the management-area map with SST labels.

    ``regions`` must come from ``load_regions()`` (north → south, with
    ``region_key`` and centroid columns).
    """
    keys = list(regions["region_key"])
    if keys != list(REGION_ORDER):
        raise ValueError(f"regions are not in north → south order: {keys}")
    matrix = np.asarray(exceedance_matrix, dtype=float)
    if matrix.shape[0] != len(keys):
        raise ValueError(f"matrix has {matrix.shape[0]} rows for {len(keys)} regions")

    display = regions if regions.crs is None else regions.to_crs(DISPLAY_CRS)

    m = folium.Map(
        location=[float(display["centroid_lat"].mean()), float(display["centroid_lon"].mean())],
        zoom_start=zoom,
        tiles=None,  # start with no default tile
        zoom_control=False,
        scrollWheelZoom=False,
        dragging=False,
        doubleClickZoom=False,
        boxZoom=False,
        keyboard=False,
    )
    folium.TileLayer(
        tiles="OpenStreetMap",
        name="Street Map",
        overlay=False,
        control=False,
    ).add_to(m)

    # ------------------------------------------------------------------
    # Management area outlines
    # ------------------------------------------------------------------
    folium.GeoJson(
        display[["region_name", display.geometry.name]],
        name="Management Areas",
        style_function=lambda _: dict(REGION_STYLE),
        tooltip=folium.GeoJsonTooltip(fields=["region_name"], aliases=["Region"]),
    ).add_to(m)

    # ------------------------------------------------------------------
    # SST labels
    # ------------------------------------------------------------------
    for i, row in enumerate(display.itertuples()):
        text = format_region_label(matrix[i], MMM_THRESHOLDS[row.region_key])
        folium.Marker(
            location=[row.centroid_lat, row.centroid_lon],
            icon=folium.DivIcon(
                html=_label_html(text),
                icon_size=LABEL_SIZE,
                icon_anchor=_label_anchor(offsets[i]),
            ),
        ).add_to(m)

    minx, miny, maxx, maxy = display.total_bounds
    m.fit_bounds([[miny, minx], [maxy, maxx]])
    return m


def _label_html(text: str) -> str:
    body = text.replace("\n", "<br>")
    return (
        f'<div style="font-size:{LABEL_FONT_SIZE}px;color:black;text-align:right;'
        f'white-space:nowrap;line-height:1.3;font-family:Inter,sans-serif;">{body}</div>'
    )


def _label_anchor(offset: Tuple[int, int]) -> Tuple[int, int]:
    # Right edge of the label sits dx px right of the centroid; dy is upward.
    dx, dy = offset
    width, height = LABEL_SIZE
    return (width - dx, height // 2 + dy)
