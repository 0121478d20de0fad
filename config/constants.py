"""
ReefHeat - Constants and Reference Thresholds

All baselines are taken from NOAA Coral Reef Watch Regional Virtual Station
products for the Great Barrier Reef (downloaded 2025-06-12):
- https://coralreefwatch.noaa.gov/product/vs/timeseries/great_barrier_reef.php
- https://coralreefwatch.noaa.gov/product/5km/methodology.php

The Maximum Monthly Mean (MMM) is the warmest of the 12 monthly mean SST
climatology values (reference period 1985-1990 plus 1993). The bleaching
threshold sits 1°C above the MMM.
"""

# =============================================================================
# Maximum Monthly Mean baselines (°C), ordered north → south
# =============================================================================
MMM_THRESHOLDS = {
    "gbr_farnorth": 28.7694,
    "gbr_north":    28.7041,
    "gbr_central":  28.3422,
    "gbr_south":    27.6570,
}

REGION_NAMES = {
    "gbr_farnorth": "Far North",
    "gbr_north":    "North",
    "gbr_central":  "Central",
    "gbr_south":    "South",
}

# Fixed row order of every exceedance matrix
REGION_ORDER = ("gbr_farnorth", "gbr_north", "gbr_central", "gbr_south")

# GBRMPA management area names → region key
MANAGEMENT_AREA_REGIONS = {
    "far northern":         "gbr_farnorth",
    "cairns":               "gbr_north",
    "townsville":           "gbr_central",
    "mackay":               "gbr_south",
}

# =============================================================================
# Accumulation windows (weeks)
# =============================================================================
WINDOW_WEEKS = (4, 8, 12)

# Column order of the exceedance matrix (reverse of WINDOW_WEEKS)
MATRIX_WINDOWS = (12, 8, 4)

DEFAULT_DHW = 20.0
DEFAULT_DHW_TEXT = "20.0"

# =============================================================================
# DHW heat-stress levels (°C-weeks)
# Source: https://coralreefwatch.noaa.gov/product/5km/index_5km_dhw.php
# =============================================================================
DHW_STRESS_LEVELS = [
    {"min_dhw": 0.0,  "label": "No Alert",  "color": "#2ecc71",
     "description": "Accumulated heat stress is below the bleaching risk level."},
    {"min_dhw": 4.0,  "label": "Alert 1",   "color": "#f1c40f",
     "description": "Risk of coral bleaching; widespread bleaching becomes observable."},
    {"min_dhw": 8.0,  "label": "Alert 2",   "color": "#e67e22",
     "description": "Reef-wide bleaching with mortality of heat-sensitive corals is likely."},
    {"min_dhw": 12.0, "label": "Alert 3",   "color": "#e74c3c",
     "description": "Multi-species mortality is likely."},
    {"min_dhw": 16.0, "label": "Alert 4",   "color": "#c0392b",
     "description": "Risk of severe, multi-species mortality (>50% of corals)."},
    {"min_dhw": 20.0, "label": "Alert 5",   "color": "#7b0d1e",
     "description": "Near complete mortality (>80% of corals) is likely."},
]

# =============================================================================
# Map label placement
# =============================================================================
# Pixel offsets (x, y) from each region centroid, north → south
REGION_LABEL_OFFSETS = ((150, 0), (150, 0), (-90, -10), (-100, -10))

LABEL_FONT_SIZE = 14

# Polygon outline style
REGION_STYLE = {
    "fillColor": "transparent",
    "fillOpacity": 0.0,
    "color": "black",
    "weight": 2,
}

# Equal-area projection used for centroids (GDA94 / Australian Albers)
CENTROID_CRS = "EPSG:3577"
DISPLAY_CRS = "EPSG:4326"

# =============================================================================
# Reference links
# =============================================================================
NOAA_METHODOLOGY_URL = "https://coralreefwatch.noaa.gov/product/5km/methodology.php"
NOAA_TIMESERIES_URL = "https://coralreefwatch.noaa.gov/product/vs/description.php#graphs"
NOAA_GBR_DATA_URL = "https://coralreefwatch.noaa.gov/product/vs/timeseries/great_barrier_reef.php"
