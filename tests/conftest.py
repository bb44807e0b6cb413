"""
Shared pytest fixtures for the Supply-Chain Impact Dashboard tests.
"""
import sys
from pathlib import Path

import pytest

# Project root holds config/scenario_parameters; the app directory holds utils/ and tabs/
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))
sys.path.insert(0, str(PROJECT_ROOT / "impact_dashboard"))


@pytest.fixture
def session_state(monkeypatch):
    """Replace Streamlit session state with a plain dict for handler tests."""
    import streamlit as st

    state = {}
    monkeypatch.setattr(st, "session_state", state)
    return state


@pytest.fixture
def intel_projection():
    """Intel's six yearly rows keyed by year."""
    from utils.query_layer import projection_series

    return {row.year: row for row in projection_series("Intel")}
