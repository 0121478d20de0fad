"""
ReefHeat - Management Area Loader

Reads the GBRMPA Marine Park Management Areas polygons (GeoPackage, GDA2020)
and orders them north → south so row ``i`` lines up with row ``i`` of every
exceedance matrix.

Order is checked, not trusted: when the dataset carries area names, each
polygon is joined to its region key by name and compared with the latitude
order.
"""

import logging
from pathlib import Path
from typing import List, Optional

import geopandas as gpd
import numpy as np

from config.constants import (
    CENTROID_CRS,
    DISPLAY_CRS,
    MANAGEMENT_AREA_REGIONS,
    REGION_NAMES,
    REGION_ORDER,
)
from config.settings import spatial_data_path

logger = logging.getLogger(__name__)


class RegionLoadError(Exception):
    """Base error for management-area loading."""


class RegionDataError(RegionLoadError):
    """Dataset missing or not shaped like the four management areas."""


class RegionOrderError(RegionLoadError):
    """Latitude order disagrees with the fixed region order."""


def load_regions(path: Optional[Path] = None, name_column: Optional[str] = None) -> gpd.GeoDataFrame:
    """
    Load management-area polygons sorted by descending centroid latitude.

    Parameters
    ----------
    path : Path, optional
        Polygon dataset; defaults to ``config.settings.spatial_data_path()``.
    name_column : str, optional
        Column holding the area names. Detected automatically when omitted.

    Returns
    -------
    GeoDataFrame with added columns ``region_key``, ``region_name``,
    ``centroid_lat`` and ``centroid_lon``.
    """
    path = Path(path) if path else spatial_data_path()
    if not path.exists():
        raise RegionDataError(f"Spatial dataset not found: {path}")

    logger.debug("Loading spatial data from %s", path)
    areas = gpd.read_file(path)
    regions = order_regions(areas, name_column=name_column)
    logger.info("Loaded %d management areas from %s", len(regions), path.name)
    return regions


def order_regions(areas: gpd.GeoDataFrame, name_column: Optional[str] = None) -> gpd.GeoDataFrame:
    """Sort polygons north → south and attach region keys."""
    if len(areas) != len(REGION_ORDER):
        raise RegionDataError(
            f"Expected {len(REGION_ORDER)} management areas, found {len(areas)}"
        )

    centroids = compute_centroids(areas)
    ordered = areas.assign(centroid_lon=centroids.x.values, centroid_lat=centroids.y.values)
    ordered = ordered.sort_values("centroid_lat", ascending=False).reset_index(drop=True)

    lats = ordered["centroid_lat"].to_numpy()
    if not np.all(np.diff(lats) < 0):
        raise RegionOrderError("Management area centroids share a latitude; order is ambiguous")

    ordered["region_key"] = list(REGION_ORDER)
    ordered["region_name"] = [REGION_NAMES[k] for k in REGION_ORDER]

    if name_column is not None and name_column not in ordered.columns:
        raise RegionDataError(f"Area name column {name_column!r} not found in dataset")
    column = name_column or find_name_column(ordered)
    if column is not None:
        joined = [match_region_key(v) for v in ordered[column]]
        if joined != list(REGION_ORDER):
            raise RegionOrderError(
                f"Area names in column {column!r} do not match north → south order: "
                f"{list(ordered[column])}"
            )
    else:
        logger.debug("No area name column found; relying on latitude order only")

    return ordered


def compute_centroids(areas: gpd.GeoDataFrame) -> gpd.GeoSeries:
    """
    Polygon centroids in display coordinates (lon/lat).

    Geographic data is projected to an equal-area CRS first so the centroid
    is computed on a plane.
    """
    if areas.crs is None:
        return areas.geometry.centroid
    projected = areas.geometry if areas.crs.is_projected else areas.geometry.to_crs(CENTROID_CRS)
    return projected.centroid.to_crs(DISPLAY_CRS)


def match_region_key(name) -> Optional[str]:
    """Map a management-area name (e.g. 'Cairns/Cooktown') to its region key."""
    if not isinstance(name, str):
        return None
    lowered = name.lower()
    for fragment, key in MANAGEMENT_AREA_REGIONS.items():
        if fragment in lowered:
            return key
    return None


def find_name_column(areas: gpd.GeoDataFrame) -> Optional[str]:
    """First non-geometry column whose every value names a management area."""
    skip = {areas.geometry.name, "region_key", "region_name"}
    candidates: List[str] = [c for c in areas.columns if c not in skip]
    for column in candidates:
        if all(match_region_key(v) is not None for v in areas[column]):
            return column
    return None
