"""
ReefHeat - DHW to SST Dashboard
================================
How hot does the water have to get to reach a target Degree Heating Week
value across the four management regions of the Great Barrier Reef?

Entry point: streamlit run app.py
"""

import logging

import streamlit as st
from streamlit_folium import st_folium

# ── Internal imports ──────────────────────────────────────────────────────────
from config.constants import (
    DEFAULT_DHW_TEXT,
    NOAA_GBR_DATA_URL,
    NOAA_METHODOLOGY_URL,
    NOAA_TIMESERIES_URL,
    REGION_LABEL_OFFSETS,
)
from config.settings import configure_logging, spatial_data_path

from data_fetch.region_loader import RegionLoadError, load_regions

from models.exceedance_model import classify_dhw_stress

from analysis.dhw_state import DHWState
from analysis.exceedance_table import build_exceedance_table

from visualization.region_map import build_region_map
from visualization.exceedance_chart import build_exceedance_chart

configure_logging()
logger = logging.getLogger("reefheat.app")

# ─────────────────────────────────────────────────────────────────────────────
# Page config
# ─────────────────────────────────────────────────────────────────────────────
st.set_page_config(
    page_title="DHW to SST",
    page_icon="🪸",
    layout="wide",
    initial_sidebar_state="expanded",
)

EXPLANATION = f"""
This dashboard assists in determining how hot in terms of sea surface temperature
(in °C) ocean water has to get to achieve a specified DHW across the four management
regions of the Great Barrier Reef. The bleaching threshold methodology as described
by NOAA is adopted here. The threshold is determined as +1°C an average historic
Maximum Monthly Mean (MMM) for each Regional Virtual Station. The reference period
used to determine the historic MMM is 1985 - 1990, plus 1993.

Reported annual Maximum DHWs use a 12-week rolling mean. For the target DHW to be
reached, the indicated temperature must be consistently maintained for any 12-week
period over the year.

DHW at 4 and 8°C-weeks are also reported as they correspond to ecological
thresholds:

- At 4°C-weeks, widespread bleaching becomes observable.
- At 8°C-weeks, significant coral mortality begins and recovery is much less likely.

Further detail on the methodology can be found in the links below:

- [Methodology]({NOAA_METHODOLOGY_URL})
- [Time Series]({NOAA_TIMESERIES_URL})

Bleaching threshold values were taken directly from NOAA datasets published here:
- [GBR datasets]({NOAA_GBR_DATA_URL})
"""


# ─────────────────────────────────────────────────────────────────────────────
# Cached spatial data
# ─────────────────────────────────────────────────────────────────────────────
@st.cache_data(show_spinner=False)
def load_management_areas(path: str):
    """Load and order the management-area polygons once per process."""
    return load_regions(path)


# ─────────────────────────────────────────────────────────────────────────────
# Session state + event handlers
# ─────────────────────────────────────────────────────────────────────────────
if "dhw_state" not in st.session_state:
    st.session_state["dhw_state"] = DHWState()

state: DHWState = st.session_state["dhw_state"]


def _on_dhw_change():
    st.session_state["dhw_state"].on_input_change(st.session_state["dhw_text"])


def _on_update():
    st.session_state["dhw_state"].on_update()


# ─────────────────────────────────────────────────────────────────────────────
# Sidebar
# ─────────────────────────────────────────────────────────────────────────────
with st.sidebar:
    st.header("Sea Temperature to DHW")

    st.text_input(
        "Target DHW:",
        value=DEFAULT_DHW_TEXT,
        key="dhw_text",
        on_change=_on_dhw_change,
        help="Degree Heating Weeks (°C-weeks)",
    )
    if not state.dhw_valid:
        st.markdown("""
        <style>
          .st-key-dhw_text input { border: 2px solid red !important; }
        </style>
        """, unsafe_allow_html=True)
        st.error(f"'{state.text}' is not a valid DHW value. Showing results for DHW = {state.computed_dhw}.")

    st.button("Update", type="primary", on_click=_on_update)

    st.divider()
    with st.expander("Explanation", expanded=True):
        st.markdown(EXPLANATION)


# ─────────────────────────────────────────────────────────────────────────────
# Main
# ─────────────────────────────────────────────────────────────────────────────
st.title("🪸 DHW to SST")

path = spatial_data_path()
with st.spinner("Loading management areas…"):
    try:
        regions = load_management_areas(str(path))
    except RegionLoadError as e:
        logger.error("Failed to load management areas: %s", e)
        st.error(f"⚠️ Spatial data error: {e}")
        st.stop()

matrix = state.exceedance_matrix
stress = classify_dhw_stress(state.computed_dhw)

st.markdown(f"""
<div style="border-left:6px solid {stress['color']};background:{stress['color']}18;
            border-radius:8px;padding:12px 18px;margin-bottom:8px;">
  <b>DHW {state.computed_dhw:g} °C-weeks · {stress['label']}</b><br>
  <span style="font-size:0.9rem;color:#555;">{stress['description']}</span>
</div>
""", unsafe_allow_html=True)

map_col, table_col = st.columns([1.4, 1.0], gap="medium")

with map_col:
    st.subheader("SST Accumulation by Region")
    region_map = build_region_map(regions, matrix, REGION_LABEL_OFFSETS)
    st_folium(region_map, height=600, width="100%", returned_objects=[])

with table_col:
    st.subheader("Estimated SST")
    st.dataframe(build_exceedance_table(matrix), hide_index=True)
    st.plotly_chart(
        build_exceedance_chart(matrix),
        width="stretch",
        config={"displayModeBar": False},
    )
    st.caption(
        "Temperatures that must be held for the full window to reach the target DHW. "
        "Threshold shows the regional Maximum Monthly Mean."
    )
