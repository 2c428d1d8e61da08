"""Trade domain model."""

from __future__ import annotations

from decimal import Decimal

from pydantic import field_validator
from pydantic.dataclasses import dataclass

from bond_pipeline.domain.products import Bond
from bond_pipeline.domain.types import TradeSide


@dataclass(frozen=True)
class Trade:
    """A booked trade, unique per trade id."""

    product: Bond
    trade_id: str
    price: Decimal
    book: str
    quantity: int
    side: TradeSide

    @field_validator("quantity")
    @classmethod
    def validate_non_negative(cls, v: int) -> int:
        """Ensure quantity is not negative; direction lives in side."""
        if v < 0:
            raise ValueError("Trade quantity must not be negative")
        return v

    @property
    def product_id(self) -> str:
        """Return the product id."""
        return self.product.product_id

    def signed_quantity(self) -> int:
        """Return +quantity for BUY and -quantity for SELL."""
        return self.side.sign() * self.quantity
