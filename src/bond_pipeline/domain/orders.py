"""Execution order domain models.

All models are immutable.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic.dataclasses import dataclass

from bond_pipeline.domain.products import Bond
from bond_pipeline.domain.types import Market, OrderType, PricingSide


@dataclass(frozen=True)
class ExecutionOrder:
    """An order sent to an execution venue.

    The side is the pricing side the order was taken from, not the
    direction of the booked trade.
    """

    product: Bond
    side: PricingSide
    order_id: str
    order_type: OrderType
    price: Decimal
    visible_quantity: int
    hidden_quantity: int
    parent_order_id: str = ""
    is_child_order: bool = False

    @property
    def product_id(self) -> str:
        """Return the product id."""
        return self.product.product_id

    def total_quantity(self) -> int:
        """Return visible plus hidden quantity."""
        return self.visible_quantity + self.hidden_quantity


@dataclass(frozen=True)
class AlgoExecution:
    """An execution order decided by the algorithm, with its target venue."""

    execution_order: ExecutionOrder
    market: Market = Market.CME

    @property
    def product_id(self) -> str:
        """Return the product id of the wrapped order."""
        return self.execution_order.product_id
