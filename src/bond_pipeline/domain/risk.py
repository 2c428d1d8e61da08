"""Risk domain models.

PV01 records are kept per product; sector records are computed on
demand by aggregating product records.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic.dataclasses import dataclass

from bond_pipeline.domain.products import Bond


@dataclass(frozen=True)
class BucketedSector:
    """A named group of products for aggregated risk."""

    name: str
    products: list[Bond]

    @property
    def product_ids(self) -> list[str]:
        """Return the ids of the products in the sector."""
        return [p.product_id for p in self.products]


@dataclass(frozen=True)
class PV01:
    """PV01 sensitivity and position quantity.

    The subject is a Bond for per-product records and a BucketedSector
    for aggregated records.
    """

    product: Bond | BucketedSector
    pv01: Decimal
    quantity: int

    @property
    def product_id(self) -> str:
        """Return the product id, or the sector name for sector records."""
        if isinstance(self.product, BucketedSector):
            return self.product.name
        return self.product.product_id
