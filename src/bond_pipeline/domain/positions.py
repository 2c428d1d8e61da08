"""Position domain model.

A position holds signed quantities per trading book for one product.
Positions are immutable; netting produces a new position that replaces
the stored one.
"""

from __future__ import annotations

from pydantic import Field
from pydantic.dataclasses import dataclass

from bond_pipeline.domain.products import Bond
from bond_pipeline.domain.trades import Trade


@dataclass(frozen=True)
class Position:
    """Signed quantity per book for a single product.

    The aggregate position is always the sum of the book quantities.
    """

    product: Bond
    positions: dict[str, int] = Field(default_factory=dict)

    @property
    def product_id(self) -> str:
        """Return the product id."""
        return self.product.product_id

    def get_position(self, book: str) -> int:
        """Return the quantity held in a book (0 if the book is unknown)."""
        return self.positions.get(book, 0)

    def aggregate_position(self) -> int:
        """Return the sum of all book quantities."""
        return sum(self.positions.values())

    def books(self) -> list[str]:
        """Return book labels in sorted order."""
        return sorted(self.positions)

    def with_quantity(self, book: str, quantity: int) -> Position:
        """Return a copy with quantity added to a book.

        Args:
            book: Book label
            quantity: Signed quantity to add

        Returns:
            New Position with the book updated
        """
        positions = dict(self.positions)
        positions[book] = positions.get(book, 0) + quantity
        return Position(product=self.product, positions=positions)

    @classmethod
    def from_trade(cls, trade: Trade) -> Position:
        """Create a position holding only the trade's signed quantity.

        Args:
            trade: Trade to convert

        Returns:
            Position with a single book entry
        """
        return cls(product=trade.product, positions={trade.book: trade.signed_quantity()})


def merge_positions(existing: Position, incoming: Position) -> Position:
    """Fold an existing position into an incoming one.

    Every book of the existing record is added into the incoming record,
    summing where the book matches. The result replaces the stored record.

    Args:
        existing: Currently stored position
        incoming: Freshly built per-trade position

    Returns:
        Merged position
    """
    merged = incoming
    for book, quantity in existing.positions.items():
        merged = merged.with_quantity(book, quantity)
    return merged
