"""
Impact Dashboard - Formatting
Human-readable text for projected metrics.
"""

from typing import List, Tuple

from scenario_parameters import METRICS


def format_value(value: float, unit: str) -> str:
    """Format a number by unit: usd -> $1,234, count -> 1,234, pct -> 12.0%."""
    if unit == "usd":
        return f"${value:,.0f}"
    if unit == "count":
        return f"{value:,.0f}"
    if unit == "pct":
        return f"{value:,.1f}%"
    return f"{value:,}"


def format_impact(impact) -> List[Tuple[str, str]]:
    """(label, text) pairs for the six projected fields of a ProjectedImpact."""
    return [
        (meta["label"], format_value(getattr(impact, field), meta["unit"]))
        for field, meta in METRICS.items()
    ]
