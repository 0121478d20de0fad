"""
ReefHeat - Exceedance Table Formatter

Turns the 4x3 exceedance matrix into a display table for the dashboard.
"""

import numpy as np
import pandas as pd
from config.constants import MATRIX_WINDOWS, MMM_THRESHOLDS, REGION_NAMES, REGION_ORDER


def build_exceedance_table(exceedance_matrix: np.ndarray, digits: int = 1) -> pd.DataFrame:
    """
    One row per region (north → south) with the MMM and each window's SST.

    Columns: Region, MMM (°C), Bleaching threshold (°C), 12 weeks (°C),
    8 weeks (°C), 4 weeks (°C).
    """
    matrix = np.asarray(exceedance_matrix, dtype=float)
    if matrix.shape != (len(REGION_ORDER), len(MATRIX_WINDOWS)):
        raise ValueError(
            f"exceedance matrix must be {len(REGION_ORDER)}x{len(MATRIX_WINDOWS)}, "
            f"got {matrix.shape}"
        )

    rows = []
    for i, region in enumerate(REGION_ORDER):
        mmm = MMM_THRESHOLDS[region]
        row = {
            "Region": REGION_NAMES[region],
            "MMM (°C)": round(mmm, digits),
            "Bleaching threshold (°C)": round(mmm + 1.0, digits),
        }
        for j, weeks in enumerate(MATRIX_WINDOWS):
            row[f"{weeks} weeks (°C)"] = round(float(matrix[i, j]), digits)
        rows.append(row)

    return pd.DataFrame(rows)
