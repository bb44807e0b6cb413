"""
Impact Dashboard - Reference Data
Compiled-in supplier locations and per-company base impact metrics.
Both tables are immutable and shared by every session of the process.
"""

import logging
from dataclasses import asdict, dataclass
from typing import Iterable, List, Optional, Tuple

import pandas as pd

from scenario_parameters import COMMON
from utils.errors import DataIntegrityError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Supplier:
    company_name: str
    component: str
    latitude: float
    longitude: float
    city: str
    state: str


@dataclass(frozen=True)
class BaseMetrics:
    """Year-2026-equivalent impact magnitudes for one company."""

    company_name: str
    base_cost_increase: float
    base_job_creation: float
    base_prod_disruption: float
    base_consumer_price: float
    base_ev_adoption: float
    base_competitiveness: float


# =============================================================================
# SUPPLIER TABLE (company -> component, location)
# =============================================================================
SUPPLIERS: Tuple[Supplier, ...] = (
    Supplier("Intel", "Semiconductors", 33.3062, -111.8413, "Chandler", "AZ"),
    Supplier("Texas Instruments", "Semiconductors", 32.9483, -96.7299, "Richardson", "TX"),
    Supplier("Dow", "Plastics", 43.6156, -84.2472, "Midland", "MI"),
    Supplier("LyondellBasell", "Plastics", 29.7604, -95.3698, "Houston", "TX"),
    Supplier("Nucor", "Steel", 35.2271, -80.8431, "Charlotte", "NC"),
    Supplier("Steel Dynamics", "Steel", 41.0793, -85.1394, "Fort Wayne", "IN"),
    Supplier("Northvolt USA", "Batteries", 42.3314, -83.0458, "Detroit", "MI"),
    Supplier("Panasonic Energy", "Batteries", 38.9792, -94.9686, "De Soto", "KS"),
    Supplier("Jabil", "Electronics", 27.7676, -82.6403, "St. Petersburg", "FL"),
    Supplier("Flex", "Electronics", 30.2672, -97.7431, "Austin", "TX"),
)

# =============================================================================
# BASE METRICS TABLE (company -> six base impact values)
# =============================================================================
# cost / consumer price in USD, jobs as headcount, the rest in percent
BASE_METRICS: Tuple[BaseMetrics, ...] = (
    BaseMetrics("Intel", 5000, 3000, 12, 1500, -3, 4),
    BaseMetrics("Texas Instruments", 4200, 2500, 10, 1200, -2, 3),
    BaseMetrics("Dow", 1800, 1200, 6, 400, -1, 2),
    BaseMetrics("LyondellBasell", 1500, 1000, 5, 350, -1, 1),
    BaseMetrics("Nucor", 3500, 4000, 8, 900, -2, 6),
    BaseMetrics("Steel Dynamics", 3000, 3500, 7, 800, -1, 5),
    BaseMetrics("Northvolt USA", 7000, 6000, 15, 2500, -6, 2),
    BaseMetrics("Panasonic Energy", 6500, 5000, 14, 2200, -5, 3),
    BaseMetrics("Jabil", 2500, 2000, 9, 700, -2, 2),
    BaseMetrics("Flex", 2200, 1800, 8, 650, -2, -1),
)


def get_suppliers() -> Tuple[Supplier, ...]:
    """Return the compiled-in supplier rows."""
    return SUPPLIERS


def get_base_metrics() -> Tuple[BaseMetrics, ...]:
    """Return the compiled-in base metric rows."""
    return BASE_METRICS


def suppliers_frame(suppliers: Optional[Iterable[Supplier]] = None) -> pd.DataFrame:
    """Supplier rows as a DataFrame (map input)."""
    rows = [asdict(s) for s in (SUPPLIERS if suppliers is None else suppliers)]
    return pd.DataFrame(rows, columns=list(Supplier.__dataclass_fields__))


def validate_reference_tables(suppliers: Iterable[Supplier], metrics: Iterable[BaseMetrics]) -> None:
    """
    Check that both tables join one-to-one on company_name.

    Raises DataIntegrityError on a duplicate company, a component outside
    the enumerated set, or a company present in only one of the tables.
    """
    suppliers = list(suppliers)
    metrics = list(metrics)
    problems: List[str] = []

    supplier_names = [s.company_name for s in suppliers]
    metric_names = [m.company_name for m in metrics]

    for label, names in (("supplier", supplier_names), ("base metrics", metric_names)):
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            problems.append(f"duplicate {label} rows: {', '.join(duplicates)}")

    for supplier in suppliers:
        if supplier.component not in COMMON["COMPONENTS"]:
            problems.append(f"{supplier.company_name} has unknown component '{supplier.component}'")

    missing_metrics = sorted(set(supplier_names) - set(metric_names))
    if missing_metrics:
        problems.append(f"no base metrics for: {', '.join(missing_metrics)}")

    missing_suppliers = sorted(set(metric_names) - set(supplier_names))
    if missing_suppliers:
        problems.append(f"no supplier row for: {', '.join(missing_suppliers)}")

    if problems:
        message = "; ".join(problems)
        logger.error("Reference data integrity check failed: %s", message)
        raise DataIntegrityError(message)
