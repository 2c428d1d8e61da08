"""Pricing module."""

from bond_pipeline.pricing.connector import PriceConnector
from bond_pipeline.pricing.service import PricingService

__all__ = [
    "PriceConnector",
    "PricingService",
]
