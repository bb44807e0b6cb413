"""
tests/test_tabs.py

Figure builders and selection-event parsing used by the tabs.
"""

from tabs.tab_projections import build_trend_figure
from tabs.tab_supplier_map import build_supplier_map, selected_company_from_event
from utils.query_layer import projection_series, suppliers_by_component


class TestSupplierMap:

    def test_one_marker_per_supplier(self):
        fig = build_supplier_map(suppliers_by_component("Steel"))
        trace = fig.data[0]
        assert list(trace.customdata) == ["Nucor", "Steel Dynamics"]
        assert len(trace.lat) == 2

    def test_event_with_point(self):
        event = {"selection": {"points": [{"point_index": 1, "customdata": "Steel Dynamics"}]}}
        assert selected_company_from_event(event) == "Steel Dynamics"

    def test_event_with_list_customdata(self):
        event = {"selection": {"points": [{"customdata": ["Nucor"]}]}}
        assert selected_company_from_event(event) == "Nucor"

    def test_empty_event(self):
        assert selected_company_from_event(None) is None
        assert selected_company_from_event({"selection": {"points": []}}) is None


def test_trend_figure_spans_horizon():
    fig = build_trend_figure(projection_series("Northvolt USA"), "job_creation")
    trace = fig.data[0]
    assert list(trace.x) == [2026, 2027, 2028, 2029, 2030, 2031]
    assert list(trace.y) == [6000, 9000, 9000, 9000, 12000, 12000]
    assert trace.text[-1] == "12,000"
