"""Trade booking.

TradeBookingService stores every booked trade by trade id and passes it
on to position keeping. ExecutionBookingListener turns execution orders
into trades: the trade is always on the opposite side of the execution
and books are assigned round-robin.
"""

from __future__ import annotations

import logging

from bond_pipeline.core.store import KeyedStore
from bond_pipeline.domain.orders import ExecutionOrder
from bond_pipeline.domain.trades import Trade
from bond_pipeline.domain.types import PricingSide, TradeSide

logger = logging.getLogger(__name__)

DEFAULT_BOOKS = ("TRSY1", "TRSY2", "TRSY3")


class TradeBookingService(KeyedStore[str, Trade]):
    """Trade store keyed by trade id."""

    def __init__(self) -> None:
        super().__init__(key=lambda trade: trade.trade_id, name="trade_booking")

    def book_trade(self, trade: Trade) -> Trade:
        """Book a trade and notify listeners."""
        logger.debug(
            f"Booked {trade.trade_id}: {trade.side.value} {trade.quantity} "
            f"{trade.product_id} into {trade.book}"
        )
        return self.on_message(trade)


class ExecutionBookingListener:
    """Books a trade for every execution order.

    The call counter is advanced before the book is chosen, so with the
    default books the first trade lands in TRSY2, then TRSY3, TRSY1, ...
    """

    def __init__(
        self,
        booking: TradeBookingService,
        books: list[str] | tuple[str, ...] = DEFAULT_BOOKS,
    ) -> None:
        """Initialize listener.

        Args:
            booking: Store receiving the trades
            books: Book labels used in rotation
        """
        self._booking = booking
        self._books = list(books)
        self._count = 0

    def next_book(self) -> str:
        """Advance the counter and return the book for the next trade."""
        self._count += 1
        return self._books[self._count % len(self._books)]

    def to_trade(self, order: ExecutionOrder) -> Trade:
        """Convert an execution order into the contra-side trade."""
        side = TradeSide.SELL if order.side == PricingSide.BID else TradeSide.BUY
        return Trade(
            product=order.product,
            trade_id=order.order_id,
            price=order.price,
            book=self.next_book(),
            quantity=order.total_quantity(),
            side=side,
        )

    def __call__(self, order: ExecutionOrder) -> None:
        self._booking.book_trade(self.to_trade(order))
