"""
Impact Dashboard - Query Layer
Read-only filters over the reference tables and cached projections.
Lookups that find nothing return empty results or None, never raise.
"""

import logging
from typing import Dict, List, Optional

from scenario_parameters import COMMON, METRICS
from utils.projection_engine import ProjectedImpact, get_projections
from utils.reference_data import Supplier, get_suppliers

logger = logging.getLogger(__name__)


def suppliers_by_component(component: str) -> List[Supplier]:
    """All suppliers of a component (empty list when none match)."""
    return [s for s in get_suppliers() if s.component == component]


def impact_by_company_component_year(company_name: str, component: str, year: int) -> Optional[ProjectedImpact]:
    """
    Look up the projected impact for a (company, component, year) triple.

    Returns None when the company is not a supplier of that component or the
    year lies outside the projection horizon. This happens in normal use,
    e.g. a marker click that arrives just after the component filter changed.
    """
    if year not in COMMON["YEARS"]:
        logger.debug("Year %s outside projection horizon", year)
        return None

    for row in get_projections():
        if row.company_name == company_name and row.component == component and row.year == year:
            return row

    logger.debug("No projection for %s / %s / %s", company_name, component, year)
    return None


def projection_series(company_name: str) -> List[ProjectedImpact]:
    """The yearly rows for one company, oldest first."""
    return [row for row in get_projections() if row.company_name == company_name]


def component_totals(component: str, year: int) -> Dict[str, float]:
    """Sum each projected metric over the suppliers of a component for one year."""
    totals = {field: 0.0 for field in METRICS}
    for row in get_projections():
        if row.component == component and row.year == year:
            for field in METRICS:
                totals[field] += getattr(row, field)
    return totals
