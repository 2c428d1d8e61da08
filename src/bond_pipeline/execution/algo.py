"""Algorithmic execution.

Watches order book snapshots and crosses the spread whenever it is
tight enough. The side taken alternates between BID and OFFER on every
execution, starting with BID. Price and quantity are copied verbatim
from the best order on the chosen side.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from bond_pipeline.core.store import KeyedStore
from bond_pipeline.domain.market_data import OrderBook
from bond_pipeline.domain.orders import AlgoExecution, ExecutionOrder
from bond_pipeline.domain.types import Market, OrderType, PricingSide
from bond_pipeline.reference.ids import OrderIdFactory, new_order_id

logger = logging.getLogger(__name__)

DEFAULT_SPREAD_THRESHOLD = Decimal(1) / Decimal(128)


class AlgoExecutionService(KeyedStore[str, AlgoExecution]):
    """Decides executions from order books, keyed by product id.

    The only state carried between books is the side toggle; books
    whose spread is wider than the threshold leave it untouched.
    """

    def __init__(
        self,
        spread_threshold: Decimal = DEFAULT_SPREAD_THRESHOLD,
        market: Market = Market.CME,
        order_ids: OrderIdFactory = new_order_id,
    ) -> None:
        """Initialize the execution algorithm.

        Args:
            spread_threshold: Maximum offer - bid spread that triggers a cross
            market: Venue targeted by generated executions
            order_ids: Factory for new order ids
        """
        super().__init__(key=lambda execution: execution.product_id, name="algo_execution")
        self._spread_threshold = spread_threshold
        self._market = market
        self._order_ids = order_ids
        self._side = PricingSide.BID

    @property
    def side(self) -> PricingSide:
        """Return the side the next execution will take."""
        return self._side

    @property
    def spread_threshold(self) -> Decimal:
        """Return the spread threshold."""
        return self._spread_threshold

    def execute(self, book: OrderBook) -> AlgoExecution | None:
        """Cross the spread on a book if it is tight enough.

        Args:
            book: Latest order book snapshot

        Returns:
            The emitted execution, or None if the spread was too wide

        Raises:
            EmptyBookError: If either side of the book is empty
        """
        bid_offer = book.bid_offer()
        if bid_offer.spread() > self._spread_threshold:
            return None

        chosen = bid_offer.bid_order if self._side == PricingSide.BID else bid_offer.offer_order
        order = ExecutionOrder(
            product=book.product,
            side=self._side,
            order_id=self._order_ids(),
            order_type=OrderType.MARKET,
            price=chosen.price,
            visible_quantity=chosen.quantity,
            hidden_quantity=0,
            parent_order_id="",
            is_child_order=False,
        )
        execution = AlgoExecution(execution_order=order, market=self._market)

        logger.debug(
            f"Crossing spread on {book.product_id}: {order.side.value} "
            f"{order.visible_quantity} @ {order.price} ({order.order_id})"
        )
        stored = self.on_message(execution)
        self._side = self._side.opposite()
        return stored
