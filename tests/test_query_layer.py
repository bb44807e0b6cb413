"""
tests/test_query_layer.py

Filter and lookup semantics behind the map and the impact panel.
"""

import pytest

from scenario_parameters import COMMON, METRICS
from utils.query_layer import (
    component_totals,
    impact_by_company_component_year,
    projection_series,
    suppliers_by_component,
)
from utils.reference_data import get_suppliers


class TestSuppliersByComponent:

    def test_steel_suppliers(self):
        suppliers = suppliers_by_component("Steel")
        assert {s.company_name for s in suppliers} == {"Nucor", "Steel Dynamics"}
        assert all(s.component == "Steel" for s in suppliers)

    @pytest.mark.parametrize("component", COMMON["COMPONENTS"])
    def test_every_component_has_two_suppliers(self, component):
        assert len(suppliers_by_component(component)) == 2

    def test_unknown_component_returns_empty(self):
        assert suppliers_by_component("Textiles") == []


class TestImpactLookup:

    def test_every_company_year_pair_resolves(self):
        for supplier in get_suppliers():
            for year in COMMON["YEARS"]:
                row = impact_by_company_component_year(supplier.company_name, supplier.component, year)
                assert row is not None, (supplier.company_name, year)
                assert row.company_name == supplier.company_name
                assert row.component == supplier.component
                assert row.year == year

    def test_component_mismatch_is_not_found(self):
        assert impact_by_company_component_year("Intel", "Plastics", 2026) is None

    def test_year_before_horizon_is_not_found(self):
        assert impact_by_company_component_year("Intel", "Semiconductors", 2025) is None

    def test_year_after_horizon_is_not_found(self):
        assert impact_by_company_component_year("Intel", "Semiconductors", 2032) is None

    def test_unknown_company_is_not_found(self):
        assert impact_by_company_component_year("Acme Parts", "Steel", 2027) is None

    def test_company_from_filter_round_trip(self):
        for supplier in suppliers_by_component("Electronics"):
            row = impact_by_company_component_year(supplier.company_name, "Electronics", 2029)
            assert row is not None
            assert row.prod_disruption == 0


class TestSupplementedQueries:

    def test_projection_series_is_ordered(self):
        rows = projection_series("Nucor")
        assert [r.year for r in rows] == COMMON["YEARS"]

    def test_projection_series_unknown_company(self):
        assert projection_series("Acme Parts") == []

    def test_component_totals_sum_suppliers(self):
        totals = component_totals("Steel", 2026)
        # Nucor 3500 + Steel Dynamics 3000
        assert totals["cost_increase"] == 6500
        assert totals["job_creation"] == 7500

    def test_component_totals_fixed_competitiveness(self):
        totals = component_totals("Batteries", 2030)
        assert totals["competitiveness"] == 10

    def test_component_totals_empty(self):
        totals = component_totals("Textiles", 2026)
        assert set(totals) == set(METRICS)
        assert all(v == 0 for v in totals.values())
