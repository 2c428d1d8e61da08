"""Trade line connector.

Lines have the form ``product,tradeId,price,book,quantity,BUY|SELL``.
"""

from __future__ import annotations

from bond_pipeline.core.connector import LineConnector
from bond_pipeline.domain.errors import RecordParseError
from bond_pipeline.domain.trades import Trade
from bond_pipeline.domain.types import TradeSide
from bond_pipeline.reference.bonds import BondReference
from bond_pipeline.reference.price_format import parse_price


class TradeConnector(LineConnector[Trade]):
    """Parses trade lines into Trade values."""

    source = "trades"
    field_count = 6

    def __init__(self, reference: BondReference) -> None:
        self._reference = reference

    def parse_line(self, line: str) -> Trade:
        product_id, trade_id, price_str, book, qty_str, side_str = self.split(line)
        try:
            side = TradeSide(side_str.upper())
        except ValueError:
            raise RecordParseError(f"Invalid trade side: {side_str!r}", line=line) from None

        quantity = self.parse_int(qty_str, line)
        if quantity < 0:
            raise RecordParseError(f"Negative trade quantity: {quantity}", line=line)

        return Trade(
            product=self._reference.resolve_product(product_id),
            trade_id=trade_id,
            price=parse_price(price_str),
            book=book,
            quantity=quantity,
            side=side,
        )
