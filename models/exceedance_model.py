"""
ReefHeat - Model: DHW → SST Exceedance

Estimates how hot (SST, °C) water has to get to reach a target Degree
Heating Week value in each Great Barrier Reef management region.

A DHW of ``d`` °C-weeks accumulated evenly over a ``w``-week window means
the water sat ``d / w`` °C above the MMM for every one of those weeks.

Sources:
  NOAA Coral Reef Watch, 5km DHW methodology
  NOAA Coral Reef Watch, Regional Virtual Station time series (GBR)
"""

import numpy as np
from typing import Dict
from config.constants import (
    DHW_STRESS_LEVELS,
    MMM_THRESHOLDS,
    REGION_ORDER,
    WINDOW_WEEKS,
)


def estimate_sst_exceedance(dhw: float) -> np.ndarray:
    """
    SST exceedance above the MMM for the 4, 8 and 12 week windows.

    Parameters
    ----------
    dhw : float
        Target Degree Heating Weeks (°C-weeks). Must be finite.

    Returns
    -------
    numpy.ndarray of shape (3,), ordered [4-week, 8-week, 12-week],
    each rounded to 2 decimals.
    """
    return np.round(dhw / np.asarray(WINDOW_WEEKS, dtype=float), 2)


def estimate_exceedance_value(dhw: float) -> np.ndarray:
    """
    4x3 matrix of estimated SST (°C) per region and window.

    Rows are the four regions north → south (``REGION_ORDER``); columns are
    [12-week, 8-week, 4-week].
    """
    exceedance = estimate_sst_exceedance(dhw)
    matrix = np.zeros((len(REGION_ORDER), len(WINDOW_WEEKS)))
    for i, region in enumerate(REGION_ORDER):
        matrix[i, :] = (MMM_THRESHOLDS[region] + exceedance)[::-1]
    return matrix


def classify_dhw_stress(dhw: float) -> Dict:
    """Highest NOAA heat-stress level reached by ``dhw``."""
    level = DHW_STRESS_LEVELS[0]
    for candidate in DHW_STRESS_LEVELS:
        if dhw >= candidate["min_dhw"]:
            level = candidate
    return dict(level)
