"""Pricing data layer for the Ghanabuild pricing engine."""

from ghanabuild.data.repository import PricingTable

__all__ = [
    "PricingTable",
]
