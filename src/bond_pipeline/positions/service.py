"""Position keeping.

Nets booked trades into per-book positions. Every trade produces a
fresh single-book position that is merged with the stored one; the
merged record replaces the stored record and is passed to listeners.
"""

from __future__ import annotations

import logging

from bond_pipeline.core.store import KeyedStore
from bond_pipeline.domain.positions import Position, merge_positions
from bond_pipeline.domain.trades import Trade

logger = logging.getLogger(__name__)


class PositionService(KeyedStore[str, Position]):
    """Position store keyed by product id, merging on update."""

    def __init__(self) -> None:
        super().__init__(
            key=lambda position: position.product_id,
            merge=merge_positions,
            name="position",
        )

    def add_trade(self, trade: Trade) -> Position:
        """Net a trade into the position of its product.

        Args:
            trade: Booked trade

        Returns:
            The merged position now stored for the product
        """
        position = self.on_message(Position.from_trade(trade))
        logger.debug(
            f"Position {trade.product_id}: {position.aggregate_position()} "
            f"after {trade.side.value} {trade.quantity} in {trade.book}"
        )
        return position
