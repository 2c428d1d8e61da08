"""Market data domain models.

An order book is a full snapshot of resting quotes for one product.
Stacks are kept in arrival order; nothing here sorts them. All models
are immutable.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic.dataclasses import dataclass

from bond_pipeline.domain.errors import EmptyBookError
from bond_pipeline.domain.products import Bond
from bond_pipeline.domain.types import PricingSide


@dataclass(frozen=True)
class Order:
    """A single resting quote line with price, quantity and side."""

    price: Decimal
    quantity: int
    side: PricingSide


@dataclass(frozen=True)
class BidOffer:
    """The best bid and best offer of a book."""

    bid_order: Order
    offer_order: Order

    def spread(self) -> Decimal:
        """Return offer price minus bid price."""
        return self.offer_order.price - self.bid_order.price


@dataclass(frozen=True)
class OrderBook:
    """Order book snapshot with a bid and an offer stack."""

    product: Bond
    bid_stack: list[Order]
    offer_stack: list[Order]

    @property
    def product_id(self) -> str:
        """Return the product id of the book."""
        return self.product.product_id

    def best_bid(self) -> Order:
        """Return the highest bid.

        Ties keep the first order encountered in stack order.

        Raises:
            EmptyBookError: If the bid stack is empty
        """
        if not self.bid_stack:
            raise EmptyBookError(self.product_id, PricingSide.BID.value)
        return max(self.bid_stack, key=lambda o: o.price)

    def best_offer(self) -> Order:
        """Return the lowest offer.

        Ties keep the first order encountered in stack order.

        Raises:
            EmptyBookError: If the offer stack is empty
        """
        if not self.offer_stack:
            raise EmptyBookError(self.product_id, PricingSide.OFFER.value)
        return min(self.offer_stack, key=lambda o: o.price)

    def bid_offer(self) -> BidOffer:
        """Return the best bid and offer together.

        Raises:
            EmptyBookError: If either stack is empty
        """
        return BidOffer(bid_order=self.best_bid(), offer_order=self.best_offer())
