"""
ReefHeat - Runtime Settings

Values that change between deployments are read from the environment.
Domain constants live in ``config.constants``.
"""

import logging
import os
from pathlib import Path
from typing import Optional

REPO_ROOT = Path(__file__).resolve().parent.parent

DEFAULT_SPATIAL_PATH = (
    REPO_ROOT / "data" / "spatial" / "GDA-2020"
    / "Great_Barrier_Reef_Marine_Park_Management_Areas_20_1685154518472315942.gpkg"
)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def spatial_data_path() -> Path:
    """Location of the management-area polygon dataset."""
    override = os.environ.get("REEFHEAT_SPATIAL_PATH")
    return Path(override) if override else DEFAULT_SPATIAL_PATH


def log_level() -> str:
    return os.environ.get("REEFHEAT_LOG_LEVEL", "INFO").upper()


def server_port() -> int:
    raw = os.environ.get("PORT", "8080")
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"PORT must be an integer, got {raw!r}") from None


def proxy_url() -> str:
    return os.environ.get("REEFHEAT_PROXY_URL", "")


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging once; later calls only adjust the level."""
    level = (level or log_level()).upper()
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level, format=LOG_FORMAT)
    root.setLevel(level)
