"""
tests/test_reference_data.py

Shape and integrity of the compiled-in supplier and base-metric tables.
"""

import dataclasses

import pytest

from scenario_parameters import COMMON
from utils.errors import DataIntegrityError
from utils.reference_data import (
    get_base_metrics,
    get_suppliers,
    suppliers_frame,
    validate_reference_tables,
)


class TestCompiledTables:

    def test_ten_companies_over_five_components(self):
        suppliers = get_suppliers()
        assert len(suppliers) == 10
        assert {s.component for s in suppliers} == set(COMMON["COMPONENTS"])

    def test_tables_join_one_to_one(self):
        assert [s.company_name for s in get_suppliers()] == [m.company_name for m in get_base_metrics()]
        validate_reference_tables(get_suppliers(), get_base_metrics())

    def test_magnitudes_are_non_negative(self):
        for m in get_base_metrics():
            assert m.base_cost_increase >= 0
            assert m.base_job_creation >= 0
            assert m.base_prod_disruption >= 0
            assert m.base_consumer_price >= 0

    def test_coordinates_are_continental_us(self):
        for s in get_suppliers():
            assert 24 < s.latitude < 50, s.company_name
            assert -125 < s.longitude < -66, s.company_name

    def test_rows_are_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            get_suppliers()[0].component = "Steel"

    def test_suppliers_frame(self):
        df = suppliers_frame()
        assert len(df) == 10
        assert {"company_name", "component", "latitude", "longitude"} <= set(df.columns)

    def test_suppliers_frame_subset(self):
        df = suppliers_frame(get_suppliers()[:2])
        assert list(df["company_name"]) == ["Intel", "Texas Instruments"]


class TestValidateReferenceTables:

    def test_duplicate_supplier(self):
        suppliers = list(get_suppliers()) + [get_suppliers()[0]]
        with pytest.raises(DataIntegrityError, match="duplicate supplier"):
            validate_reference_tables(suppliers, get_base_metrics())

    def test_unknown_component(self):
        suppliers = list(get_suppliers())
        suppliers[0] = dataclasses.replace(suppliers[0], component="Textiles")
        with pytest.raises(DataIntegrityError, match="unknown component"):
            validate_reference_tables(suppliers, get_base_metrics())

    def test_missing_supplier_row(self):
        suppliers = [s for s in get_suppliers() if s.company_name != "Jabil"]
        with pytest.raises(DataIntegrityError, match="no supplier row for: Jabil"):
            validate_reference_tables(suppliers, get_base_metrics())
