import geopandas as gpd
import pytest
from shapely.geometry import box


# Rough outlines of the four GBRMPA management areas, deliberately shuffled.
AREAS = [
    ("Townsville/Whitsunday Management Area", box(146.5, -20.5, 149.5, -17.5)),
    ("Far Northern Management Area", box(142.5, -14.0, 145.0, -10.5)),
    ("Mackay/Capricorn Management Area", box(149.5, -24.5, 153.0, -20.5)),
    ("Cairns/Cooktown Management Area", box(145.0, -17.5, 147.0, -14.0)),
]


@pytest.fixture
def management_areas():
    return gpd.GeoDataFrame(
        {"AREA_DESCR": [name for name, _ in AREAS], "AREA_ID": [3, 1, 4, 2]},
        geometry=[geom for _, geom in AREAS],
        crs="EPSG:4326",
    )


@pytest.fixture
def unnamed_areas(management_areas):
    return management_areas.drop(columns=["AREA_DESCR"])


@pytest.fixture
def areas_file(management_areas, tmp_path):
    path = tmp_path / "management_areas.geojson"
    management_areas.to_file(path, driver="GeoJSON")
    return path
