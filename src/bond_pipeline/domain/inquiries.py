"""Customer inquiry domain model."""

from __future__ import annotations

from decimal import Decimal

from pydantic.dataclasses import dataclass

from bond_pipeline.domain.products import Bond
from bond_pipeline.domain.types import InquiryState, TradeSide


@dataclass(frozen=True)
class Inquiry:
    """A customer request for a quote.

    Immutable - use with_state() or with_price() to get updated copies.
    """

    inquiry_id: str
    product: Bond
    side: TradeSide
    quantity: int
    price: Decimal
    state: InquiryState

    @property
    def product_id(self) -> str:
        """Return the product id."""
        return self.product.product_id

    def with_state(self, state: InquiryState) -> Inquiry:
        """Return a copy with an updated state."""
        return Inquiry(
            inquiry_id=self.inquiry_id,
            product=self.product,
            side=self.side,
            quantity=self.quantity,
            price=self.price,
            state=state,
        )

    def with_price(self, price: Decimal) -> Inquiry:
        """Return a copy with an updated price."""
        return Inquiry(
            inquiry_id=self.inquiry_id,
            product=self.product,
            side=self.side,
            quantity=self.quantity,
            price=price,
            state=self.state,
        )
