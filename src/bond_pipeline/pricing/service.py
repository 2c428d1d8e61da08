"""Pricing service: latest internal price per product."""

from __future__ import annotations

from bond_pipeline.core.store import KeyedStore
from bond_pipeline.domain.pricing import Price


class PricingService(KeyedStore[str, Price]):
    """Price store keyed by product id.

    Later prices replace earlier ones. Listeners are the quote
    streaming algorithm and the GUI stage.
    """

    def __init__(self) -> None:
        super().__init__(key=lambda price: price.product_id, name="pricing")
