"""Price and price stream domain models.

A Price is the internal mid/spread for a product. A PriceStream is the
two-sided quote we publish for that product. All models are immutable.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic.dataclasses import dataclass

from bond_pipeline.domain.products import Bond
from bond_pipeline.domain.types import PricingSide


@dataclass(frozen=True)
class Price:
    """Mid price and bid/offer spread for a product.

    Later prices for a product fully replace earlier ones.
    """

    product: Bond
    mid: Decimal
    bid_offer_spread: Decimal

    @property
    def product_id(self) -> str:
        """Return the product id."""
        return self.product.product_id

    def bid(self) -> Decimal:
        """Return mid minus half the spread."""
        return self.mid - self.bid_offer_spread / 2

    def offer(self) -> Decimal:
        """Return mid plus half the spread."""
        return self.mid + self.bid_offer_spread / 2

    @classmethod
    def from_bid_offer(cls, product: Bond, bid: Decimal, offer: Decimal) -> Price:
        """Create a Price from a bid and an offer.

        Args:
            product: Priced product
            bid: Bid price
            offer: Offer price

        Returns:
            Price with mid = (bid + offer) / 2 and spread = offer - bid
        """
        return cls(product=product, mid=(bid + offer) / 2, bid_offer_spread=offer - bid)


@dataclass(frozen=True)
class PriceStreamOrder:
    """One side of a published quote."""

    price: Decimal
    visible_quantity: int
    hidden_quantity: int
    side: PricingSide


@dataclass(frozen=True)
class PriceStream:
    """Two-sided quote for a product."""

    product: Bond
    bid_order: PriceStreamOrder
    offer_order: PriceStreamOrder

    @property
    def product_id(self) -> str:
        """Return the product id."""
        return self.product.product_id


@dataclass(frozen=True)
class AlgoStream:
    """A price stream produced by the quoting algorithm."""

    price_stream: PriceStream

    @property
    def product_id(self) -> str:
        """Return the product id of the wrapped stream."""
        return self.price_stream.product_id
