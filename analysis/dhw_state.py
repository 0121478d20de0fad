"""
ReefHeat - Dashboard DHW State

Holds the target DHW entered in the dashboard and the exceedance matrix
derived from it. The UI registers ``on_input_change`` against the text field
and ``on_update`` against the Update button.

Rules:
  - unparseable or non-finite text flags the input invalid and keeps the
    last valid DHW
  - the matrix is only recomputed on Update, and only while the input is valid
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Optional

import numpy as np

from config.constants import DEFAULT_DHW, DEFAULT_DHW_TEXT
from models.exceedance_model import estimate_exceedance_value

logger = logging.getLogger(__name__)


def parse_dhw(text) -> Optional[float]:
    """Parse free text to a finite float, or ``None``."""
    if text is None:
        return None
    try:
        value = float(str(text).strip())
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


@dataclass(eq=False)
class DHWState:
    text: str = DEFAULT_DHW_TEXT
    dhw_value: float = DEFAULT_DHW
    dhw_valid: bool = True
    exceedance_matrix: Optional[np.ndarray] = field(default=None, repr=False)
    # DHW the current matrix was computed from
    computed_dhw: float = DEFAULT_DHW

    def __post_init__(self):
        if self.exceedance_matrix is None:
            self.exceedance_matrix = estimate_exceedance_value(self.dhw_value)
            self.computed_dhw = self.dhw_value

    def on_input_change(self, text) -> bool:
        """Record new input text; returns whether it parsed."""
        self.text = text
        value = parse_dhw(text)
        if value is None:
            self.dhw_valid = False
            logger.debug("Rejected DHW input %r", text)
            return False
        self.dhw_value = value
        self.dhw_valid = True
        return True

    def on_update(self) -> bool:
        """Recompute the matrix from the last valid DHW; no-op while invalid."""
        if not self.dhw_valid:
            logger.warning("Invalid DHW value %r - skipping update", self.text)
            return False

        logger.debug("Updating exceedance matrix for DHW=%s", self.dhw_value)
        self.exceedance_matrix = estimate_exceedance_value(self.dhw_value)
        self.computed_dhw = self.dhw_value
        return True
