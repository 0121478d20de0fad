"""
Tests for the region map, label text and exceedance chart.
"""

import warnings

import folium
import numpy as np
import plotly.graph_objects as go
import pytest

from config.constants import REGION_LABEL_OFFSETS
from data_fetch.region_loader import order_regions
from models.exceedance_model import estimate_exceedance_value
from visualization.exceedance_chart import build_exceedance_chart
from visualization.region_map import (
    LABEL_SIZE,
    _label_anchor,
    build_region_map,
    format_region_label,
)


# ---------------------------------------------------------------------------
# Label text
# ---------------------------------------------------------------------------

class TestRegionLabel:
    def test_far_north_at_twenty(self):
        row = estimate_exceedance_value(20.0)[0]
        assert format_region_label(row, 28.7694) == (
            "12 weeks: 30.4°C\n"
            "8 weeks: 31.3°C\n"
            "4 weeks: 33.8°C\n"
            "Threshold: 28.8°C"
        )

    def test_south_at_zero(self):
        row = estimate_exceedance_value(0.0)[3]
        assert format_region_label(row, 27.6570) == (
            "12 weeks: 27.7°C\n"
            "8 weeks: 27.7°C\n"
            "4 weeks: 27.7°C\n"
            "Threshold: 27.7°C"
        )

    def test_four_lines(self):
        assert len(format_region_label([1.0, 2.0, 3.0], 0.0).splitlines()) == 4


# ---------------------------------------------------------------------------
# Folium map
# ---------------------------------------------------------------------------

def _markers(m: folium.Map):
    return [c for c in m._children.values() if isinstance(c, folium.Marker)]


class TestRegionMap:
    def test_one_label_per_region(self, management_areas):
        regions = order_regions(management_areas)
        m = build_region_map(regions, estimate_exceedance_value(20.0))
        markers = _markers(m)
        assert len(markers) == 4
        # Labels sit on the centroids, north first
        assert markers[0].location[0] == pytest.approx(regions.loc[0, "centroid_lat"])
        assert markers[3].location[0] == pytest.approx(regions.loc[3, "centroid_lat"])

    def test_outline_layer(self, management_areas):
        regions = order_regions(management_areas)
        m = build_region_map(regions, estimate_exceedance_value(20.0))
        layers = [c for c in m._children.values() if isinstance(c, folium.GeoJson)]
        assert len(layers) == 1
        style = layers[0].style_function({})
        assert style["fillColor"] == "transparent"
        assert style["color"] == "black"
        assert style["weight"] == 2

    def test_label_values_in_html(self, management_areas):
        regions = order_regions(management_areas)
        html = build_region_map(regions, estimate_exceedance_value(20.0)).get_root().render()
        assert "12 weeks: 30.4" in html
        assert "4 weeks: 33.8" in html

    def test_base_tiles_need_no_api_key(self, management_areas):
        regions = order_regions(management_areas)
        with warnings.catch_warnings():
            warnings.simplefilter("error", UserWarning)
            m = build_region_map(regions, estimate_exceedance_value(20.0))
        tiles = [c for c in m._children.values() if isinstance(c, folium.TileLayer)]
        assert len(tiles) == 1
        assert "openstreetmap" in tiles[0].tiles.lower()

    def test_rejects_unordered_regions(self, management_areas):
        regions = order_regions(management_areas).iloc[::-1].reset_index(drop=True)
        with pytest.raises(ValueError, match="order"):
            build_region_map(regions, estimate_exceedance_value(20.0))

    def test_rejects_wrong_matrix(self, management_areas):
        regions = order_regions(management_areas)
        with pytest.raises(ValueError):
            build_region_map(regions, np.zeros((3, 3)))

    def test_label_anchor_matches_offsets(self):
        width, height = LABEL_SIZE
        assert _label_anchor(REGION_LABEL_OFFSETS[0]) == (width - 150, height // 2)
        assert _label_anchor(REGION_LABEL_OFFSETS[3]) == (width + 100, height // 2 - 10)


# ---------------------------------------------------------------------------
# Exceedance chart
# ---------------------------------------------------------------------------

class TestExceedanceChart:
    def setup_method(self):
        self.matrix = estimate_exceedance_value(20.0)
        self.fig = build_exceedance_chart(self.matrix)

    def test_is_figure(self):
        assert isinstance(self.fig, go.Figure)

    def test_one_bar_trace_per_window(self):
        bars = [t for t in self.fig.data if isinstance(t, go.Bar)]
        assert [t.name for t in bars] == ["12 weeks", "8 weeks", "4 weeks"]
        np.testing.assert_allclose(bars[2].y, self.matrix[:, 2])

    def test_regions_on_x(self):
        assert list(self.fig.data[0].x) == ["Far North", "North", "Central", "South"]
