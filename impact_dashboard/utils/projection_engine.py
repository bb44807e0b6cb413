"""
Impact Dashboard - Projection Engine
Turns each company's base metrics into one projected row per year (2026-2031)
using the fixed year-rule table from scenario_parameters.
"""

import logging
from dataclasses import asdict, dataclass
from functools import lru_cache
from typing import Iterable, List, Optional, Tuple

import pandas as pd

from scenario_parameters import COMMON, METRICS, ROUNDING_DIGITS, YEAR_RULES
from utils.errors import DataIntegrityError
from utils.reference_data import (
    BaseMetrics,
    Supplier,
    get_base_metrics,
    get_suppliers,
    validate_reference_tables,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProjectedImpact:
    company_name: str
    component: str
    year: int
    cost_increase: float
    job_creation: float
    prod_disruption: float
    competitiveness: float
    consumer_price: float
    ev_adoption: float


PROJECTION_COLUMNS = list(ProjectedImpact.__dataclass_fields__)


def apply_year_rule(field: str, base_value: float, year: int) -> float:
    """
    Project one base value for one year.

    The result depends only on (field, base_value, year); there is no
    carry-over from earlier years. Unknown fields or years raise KeyError.
    """
    kind, value = YEAR_RULES[field][year]
    if kind == "fixed":
        return float(value)
    if kind == "scale":
        return round(base_value * value, ROUNDING_DIGITS)
    raise ValueError(f"Unknown rule kind '{kind}' for {field}/{year}")


def project_company(supplier: Supplier, metrics: BaseMetrics) -> List[ProjectedImpact]:
    """Build the six yearly rows for one joined supplier/base-metrics pair."""
    if supplier.company_name != metrics.company_name:
        raise DataIntegrityError(
            f"Cannot join supplier '{supplier.company_name}' with base metrics for '{metrics.company_name}'"
        )

    rows = []
    for year in COMMON["YEARS"]:
        values = {
            field: apply_year_rule(field, getattr(metrics, meta["base"]), year)
            for field, meta in METRICS.items()
        }
        rows.append(ProjectedImpact(
            company_name=supplier.company_name,
            component=supplier.component,
            year=year,
            **values,
        ))
    return rows


def build_projections(suppliers: Iterable[Supplier], metrics: Iterable[BaseMetrics]) -> Tuple[ProjectedImpact, ...]:
    """
    Join suppliers to base metrics and project every company over the horizon.

    Rows are ordered by supplier-table order, then year.
    """
    suppliers = list(suppliers)
    metrics = list(metrics)
    validate_reference_tables(suppliers, metrics)

    metrics_by_company = {m.company_name: m for m in metrics}
    rows: List[ProjectedImpact] = []
    for supplier in suppliers:
        rows.extend(project_company(supplier, metrics_by_company[supplier.company_name]))

    logger.info("Built %d projected impact rows for %d companies", len(rows), len(suppliers))
    return tuple(rows)


@lru_cache(maxsize=1)
def get_projections() -> Tuple[ProjectedImpact, ...]:
    """Projections over the compiled-in tables, computed once per process."""
    return build_projections(get_suppliers(), get_base_metrics())


def projections_frame(component: Optional[str] = None) -> pd.DataFrame:
    """Projection rows as a DataFrame, optionally restricted to one component."""
    rows = [asdict(p) for p in get_projections() if component is None or p.component == component]
    return pd.DataFrame(rows, columns=PROJECTION_COLUMNS)
