"""Algorithmic quote streaming.

Turns every internal price into a symmetric two-sided quote:

    bid   = mid - spread / 2
    offer = mid + spread / 2

The visible size cycles through a fixed list of levels across calls
(10mm, 20mm, 10mm, ... by default) and the hidden size is always a fixed
multiple of the visible size.
"""

from __future__ import annotations

import logging

from bond_pipeline.core.store import KeyedStore
from bond_pipeline.domain.pricing import AlgoStream, Price, PriceStream, PriceStreamOrder
from bond_pipeline.domain.types import PricingSide

logger = logging.getLogger(__name__)


class AlgoStreamingService(KeyedStore[str, AlgoStream]):
    """Builds algo streams from prices, keyed by product id."""

    def __init__(
        self,
        visible_sizes: list[int] | None = None,
        hidden_ratio: int = 2,
    ) -> None:
        """Initialize the quoting algorithm.

        Args:
            visible_sizes: Visible size levels, used in rotation
            hidden_ratio: Hidden size as a multiple of the visible size
        """
        super().__init__(key=lambda stream: stream.product_id, name="algo_streaming")
        self._visible_sizes = list(visible_sizes or [10_000_000, 20_000_000])
        self._hidden_ratio = hidden_ratio
        self._count = 0

    @property
    def count(self) -> int:
        """Return the number of streams built so far."""
        return self._count

    def next_visible_size(self) -> int:
        """Return the visible size the next quote will use."""
        return self._visible_sizes[self._count % len(self._visible_sizes)]

    def build_stream(self, price: Price) -> AlgoStream:
        """Build the two-sided quote for a price and advance the size rotation."""
        visible = self.next_visible_size()
        hidden = visible * self._hidden_ratio
        self._count += 1

        stream = PriceStream(
            product=price.product,
            bid_order=PriceStreamOrder(
                price=price.bid(),
                visible_quantity=visible,
                hidden_quantity=hidden,
                side=PricingSide.BID,
            ),
            offer_order=PriceStreamOrder(
                price=price.offer(),
                visible_quantity=visible,
                hidden_quantity=hidden,
                side=PricingSide.OFFER,
            ),
        )
        return AlgoStream(price_stream=stream)

    def publish_price(self, price: Price) -> AlgoStream:
        """Build a stream for a price, store it and notify listeners.

        Args:
            price: Latest internal price

        Returns:
            The published algo stream
        """
        algo_stream = self.build_stream(price)
        logger.debug(
            f"Algo stream {price.product_id}: "
            f"{algo_stream.price_stream.bid_order.visible_quantity} visible"
        )
        return self.on_message(algo_stream)
