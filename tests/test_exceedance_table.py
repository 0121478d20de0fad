"""
Tests for the exceedance display table.
"""

import numpy as np
import pytest

from analysis.exceedance_table import build_exceedance_table
from models.exceedance_model import estimate_exceedance_value


class TestExceedanceTable:
    def setup_method(self):
        self.table = build_exceedance_table(estimate_exceedance_value(20.0))

    def test_columns(self):
        assert list(self.table.columns) == [
            "Region",
            "MMM (°C)",
            "Bleaching threshold (°C)",
            "12 weeks (°C)",
            "8 weeks (°C)",
            "4 weeks (°C)",
        ]

    def test_rows_north_to_south(self):
        assert list(self.table["Region"]) == ["Far North", "North", "Central", "South"]

    def test_far_north_values(self):
        row = self.table.iloc[0]
        assert row["MMM (°C)"] == pytest.approx(28.8)
        assert row["Bleaching threshold (°C)"] == pytest.approx(29.8)
        assert row["12 weeks (°C)"] == pytest.approx(30.4)
        assert row["8 weeks (°C)"] == pytest.approx(31.3)
        assert row["4 weeks (°C)"] == pytest.approx(33.8)

    def test_precision(self):
        table = build_exceedance_table(estimate_exceedance_value(20.0), digits=2)
        assert table.iloc[3]["12 weeks (°C)"] == pytest.approx(29.33)

    def test_rejects_wrong_shape(self):
        with pytest.raises(ValueError):
            build_exceedance_table(np.zeros((4, 2)))
