"""Market data line connector.

Lines have the form ``product,price,quantity,BID|OFFER``. Lines are
buffered per side and emitted as one OrderBook snapshot every
``2 * book_depth`` lines. The snapshot is labelled with the product of
the last line in the batch, so a batch that spans two products is
attributed entirely to the second one.
"""

from __future__ import annotations

import logging

from bond_pipeline.core.connector import LineConnector
from bond_pipeline.domain.errors import RecordParseError
from bond_pipeline.domain.market_data import Order, OrderBook
from bond_pipeline.domain.types import PricingSide
from bond_pipeline.reference.bonds import BondReference
from bond_pipeline.reference.price_format import parse_price

logger = logging.getLogger(__name__)


class MarketDataConnector(LineConnector[OrderBook]):
    """Batches order lines into order book snapshots."""

    source = "market_data"
    field_count = 4

    def __init__(self, reference: BondReference, book_depth: int = 5) -> None:
        """Initialize connector.

        Args:
            reference: Product lookup
            book_depth: Price levels per side in one snapshot
        """
        self._reference = reference
        self._batch_size = 2 * book_depth
        self._bids: list[Order] = []
        self._offers: list[Order] = []
        self._count = 0

    @property
    def batch_size(self) -> int:
        """Return the number of lines per snapshot."""
        return self._batch_size

    @property
    def pending(self) -> int:
        """Return lines buffered towards the next snapshot."""
        return self._count

    def parse_order(self, line: str) -> tuple[str, Order]:
        """Parse a single order line.

        Returns:
            (product id, order)

        Raises:
            RecordParseError: If the line is malformed
        """
        product_id, price_str, qty_str, side_str = self.split(line)
        try:
            side = PricingSide(side_str.upper())
        except ValueError:
            raise RecordParseError(f"Invalid pricing side: {side_str!r}", line=line) from None

        order = Order(
            price=parse_price(price_str),
            quantity=self.parse_int(qty_str, line),
            side=side,
        )
        return product_id, order

    def parse_line(self, line: str) -> OrderBook | None:
        """Buffer one order line, emitting a snapshot when the batch is full."""
        product_id, order = self.parse_order(line)

        if order.side == PricingSide.BID:
            self._bids.append(order)
        else:
            self._offers.append(order)
        self._count += 1

        if self._count < self._batch_size:
            return None

        book = OrderBook(
            product=self._reference.resolve_product(product_id),
            bid_stack=self._bids,
            offer_stack=self._offers,
        )
        self._bids = []
        self._offers = []
        self._count = 0
        logger.debug(
            f"Order book snapshot {product_id}: "
            f"{len(book.bid_stack)} bids, {len(book.offer_stack)} offers"
        )
        return book
