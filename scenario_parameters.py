"""
Supply-Chain Impact Scenario Parameters
---------------------------------------
Single source of truth for the constants of the hypothetical U.S. automotive
supply-chain scenario: selector values, the projection horizon, the metric
catalogue and the year-rule table that turns base values into projections.

Usage:
    from scenario_parameters import COMMON, METRICS, YEAR_RULES, MAP
"""

# =============================================================================
# 0. COMMON PARAMETERS (Shared Across All Tabs)
# =============================================================================
COMMON = {
    # Component categories - primary filter axis for map and lookups
    "COMPONENTS": ["Semiconductors", "Plastics", "Steel", "Batteries", "Electronics"],

    # Automakers - informational selector only, never joined against supplier data
    "AUTOMAKERS": ["Ford", "GM", "Stellantis", "Tesla"],

    # Projection horizon - 2026 is the base year
    "YEARS": list(range(2026, 2032)),  # [2026, 2027, 2028, 2029, 2030, 2031]
    "BASE_YEAR": 2026,
}

# =============================================================================
# 1. METRIC CATALOGUE
# =============================================================================
# Projected field -> (BaseMetrics field, display label, unit)
# unit: "usd" renders as $1,234 ; "count" as 1,234 ; "pct" as 12.0%
METRICS = {
    "cost_increase":   {"base": "base_cost_increase",   "label": "Cost Increase",          "unit": "usd"},
    "job_creation":    {"base": "base_job_creation",    "label": "Job Creation",           "unit": "count"},
    "prod_disruption": {"base": "base_prod_disruption", "label": "Production Disruption",  "unit": "pct"},
    "competitiveness": {"base": "base_competitiveness", "label": "Competitiveness",        "unit": "pct"},
    "consumer_price":  {"base": "base_consumer_price",  "label": "Consumer Price Impact",  "unit": "usd"},
    "ev_adoption":     {"base": "base_ev_adoption",     "label": "EV Adoption",            "unit": "pct"},
}

# =============================================================================
# 2. YEAR RULES (Projection Engine)
# =============================================================================
# field -> year -> (kind, value)
#   ("scale", m): projected = base * m
#   ("fixed", c): projected = c, regardless of the base value
YEAR_RULES = {
    "cost_increase": {
        2026: ("scale", 1.0),
        2027: ("scale", 1.0),
        2028: ("scale", 0.8),
        2029: ("scale", 0.6),
        2030: ("scale", 0.5),
        2031: ("scale", 0.5),
    },
    "job_creation": {
        2026: ("scale", 1.0),
        2027: ("scale", 1.5),
        2028: ("scale", 1.5),
        2029: ("scale", 1.5),
        2030: ("scale", 2.0),
        2031: ("scale", 2.0),
    },
    "prod_disruption": {
        2026: ("scale", 1.0),
        2027: ("scale", 1.0),
        2028: ("scale", 0.5),
        2029: ("fixed", 0),
        2030: ("fixed", 0),
        2031: ("fixed", 0),
    },
    "competitiveness": {
        2026: ("scale", 1.0),
        2027: ("scale", 1.0),
        2028: ("fixed", 0),
        2029: ("fixed", 5),
        2030: ("fixed", 5),
        2031: ("fixed", 5),
    },
    "consumer_price": {
        2026: ("scale", 1.0),
        2027: ("scale", 1.0),
        2028: ("scale", 0.8),
        2029: ("scale", 0.6),
        2030: ("scale", 0.6),
        2031: ("scale", 0.6),
    },
    "ev_adoption": {
        2026: ("scale", 1.0),
        2027: ("scale", 1.0),
        2028: ("scale", 0.5),
        2029: ("fixed", 0),
        2030: ("fixed", 0),
        2031: ("fixed", 0),
    },
}

# Scaled values are rounded to cents / hundredths
ROUNDING_DIGITS = 2

# =============================================================================
# 3. MAP PARAMETERS (Supplier Map Tab)
# =============================================================================
MAP = {
    "SCOPE": "usa",
    "MARKER_SIZE": 14,
    "COMPONENT_COLORS": {
        "Semiconductors": "#1f77b4",
        "Plastics": "#ff7f0e",
        "Steel": "#7f7f7f",
        "Batteries": "#2ca02c",
        "Electronics": "#9467bd",
    },
}
