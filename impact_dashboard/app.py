"""
Auto Supply-Chain Impact Dashboard - Main Application
Hypothetical 2026-2031 impact projections for U.S. automotive suppliers.

Run with: streamlit run impact_dashboard/app.py
"""

import sys
from pathlib import Path

import streamlit as st

# Project root holds config.py and scenario_parameters.py
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))
sys.path.insert(0, str(Path(__file__).resolve().parent))

from config import PAGE_TITLE, configure_logging
from scenario_parameters import COMMON

# Import utilities
from utils.errors import DataIntegrityError
from utils.export_engine import create_export_zip
from utils.projection_engine import get_projections
from utils.state_manager import (
    init_session_state, get_state,
    on_automaker_change, on_component_change, on_year_change,
)

# Import tabs
from tabs.tab_supplier_map import render_supplier_map_tab
from tabs.tab_projections import render_projections_tab


@st.cache_data(show_spinner=False)
def _export_archive(component):
    """Projection ZIP for one component (None for all), built once per component."""
    return create_export_zip(component)


# =============================================================================
# PAGE CONFIG
# =============================================================================
st.set_page_config(
    page_title=PAGE_TITLE,
    page_icon="🚗",
    layout="wide",
    initial_sidebar_state="expanded"
)

configure_logging()

# Reference data must join cleanly before anything is rendered
try:
    get_projections()
except DataIntegrityError as e:
    st.error(f"Reference data is inconsistent: {e}")
    st.stop()

# Initialize session state
init_session_state()

# =============================================================================
# SIDEBAR - Scenario Selection
# =============================================================================
with st.sidebar:
    st.title("🚗 Supply-Chain Impact")
    st.caption("Hypothetical scenario - illustrative values only")

    st.markdown("---")

    st.subheader("🎛️ Scenario")

    automakers = COMMON['AUTOMAKERS']
    st.selectbox(
        "Automaker",
        automakers,
        index=automakers.index(get_state('selected_automaker')),
        key='automaker_select',
        on_change=lambda: on_automaker_change(st.session_state['automaker_select']),
    )
    st.caption("Automaker is informational; supplier data is shared across automakers.")

    components = COMMON['COMPONENTS']
    st.selectbox(
        "Component",
        components,
        index=components.index(get_state('selected_component')),
        key='component_select',
        on_change=lambda: on_component_change(st.session_state['component_select']),
    )

    years = COMMON['YEARS']
    st.selectbox(
        "Year",
        years,
        index=years.index(get_state('selected_year')),
        key='year_select',
        on_change=lambda: on_year_change(st.session_state['year_select']),
    )

    st.markdown("---")

    # Export Button
    st.subheader("📤 Export Projections")
    export_all = st.checkbox("All components", value=False, key='export_all')
    st.download_button(
        label="💾 Download projections.zip",
        data=_export_archive(None if export_all else get_state('selected_component')),
        file_name="projections.zip",
        mime="application/zip",
        type="primary",
        use_container_width=True
    )

# =============================================================================
# MAIN CONTENT - Tabs
# =============================================================================
st.caption(f"Viewing as **{get_state('selected_automaker')}**")

tabs = st.tabs([
    "🗺️ Supplier Map",
    "📈 Projection Explorer",
])

with tabs[0]:
    render_supplier_map_tab()

with tabs[1]:
    render_projections_tab()
