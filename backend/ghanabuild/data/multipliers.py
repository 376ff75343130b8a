"""Pricing multipliers for the Ghanabuild pricing table.

These are fixed illustrative figures, not sourced market data.
"""

from __future__ import annotations

# Base construction cost before any multiplier, in USD per square foot.
BASE_COST_PER_SQFT: float = 50.0

# Maps region_lower -> multiplier.
REGION_MULTIPLIERS: dict[str, float] = {
    "greater accra": 1.2,
    "ashanti": 1.0,
    "western": 0.9,
    "eastern": 0.85,
    "northern": 0.75,
}

PROJECT_TYPE_MULTIPLIERS: dict[str, float] = {
    "residential": 1.0,
    "commercial": 1.3,
    "industrial": 1.5,
}

FINISH_QUALITY_MULTIPLIERS: dict[str, float] = {
    "basic": 0.8,
    "standard": 1.0,
    "premium": 1.3,
    "luxury": 1.8,
}

# Used for any region, project type or finish quality not listed above
DEFAULT_MULTIPLIER: float = 1.0
