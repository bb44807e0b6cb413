"""
Impact Dashboard - State Manager
Manages session state and the explicit event handlers that mutate it.
Every dropdown change or marker click goes through one of the on_* handlers;
the page then re-renders from the stored selection.
"""

import streamlit as st
from typing import Any, Optional

from scenario_parameters import COMMON
from utils.query_layer import impact_by_company_component_year, suppliers_by_component


def init_session_state():
    """Initialize all session state variables."""
    defaults = {
        # Dropdown selections
        'selected_automaker': COMMON['AUTOMAKERS'][0],
        'selected_component': COMMON['COMPONENTS'][0],
        'selected_year': COMMON['YEARS'][0],

        # Map selection event
        'selected_company': None,

        # Projection explorer
        'trend_metric': 'cost_increase',
    }

    for key, default in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = default


def get_state(key: str, default: Any = None) -> Any:
    """Get a value from session state."""
    return st.session_state.get(key, default)


def set_state(key: str, value: Any):
    """Set a value in session state."""
    st.session_state[key] = value


def on_automaker_change(automaker: str):
    """Store the automaker. It does not filter suppliers or projections."""
    set_state('selected_automaker', automaker)


def on_component_change(component: str):
    """Store the component and drop a company selection that no longer applies."""
    set_state('selected_component', component)
    company = get_state('selected_company')
    if company and company not in {s.company_name for s in suppliers_by_component(component)}:
        set_state('selected_company', None)


def on_year_change(year: int):
    """Store the projection year."""
    set_state('selected_year', int(year))


def on_supplier_selected(company_name: Optional[str]):
    """Store the company carried by a marker click (or the fallback picker)."""
    set_state('selected_company', company_name)


def current_impact():
    """Projected impact for the current (company, component, year) selection, or None."""
    company = get_state('selected_company')
    if not company:
        return None
    return impact_by_company_component_year(
        company,
        get_state('selected_component'),
        get_state('selected_year'),
    )
