"""Execution service: latest execution order per product."""

from __future__ import annotations

import logging

from bond_pipeline.core.store import KeyedStore
from bond_pipeline.domain.orders import AlgoExecution, ExecutionOrder
from bond_pipeline.domain.types import Market

logger = logging.getLogger(__name__)


class ExecutionService(KeyedStore[str, ExecutionOrder]):
    """Execution order store keyed by product id.

    Only the latest order per product is retained. Listeners are the
    trade booking bridge and the execution history.
    """

    def __init__(self) -> None:
        super().__init__(key=lambda order: order.product_id, name="execution")

    def execute_order(self, order: ExecutionOrder, market: Market) -> ExecutionOrder:
        """Send an order to a market, store it and notify listeners.

        Args:
            order: Order to execute
            market: Target venue

        Returns:
            The stored order
        """
        logger.debug(f"Executing {order.order_id} on {market.value}")
        return self.on_message(order)

    def on_algo_execution(self, execution: AlgoExecution) -> None:
        """Listener for the execution algorithm."""
        self.execute_order(execution.execution_order, execution.market)
