"""Inquiry line connector.

Lines have the form ``inquiryId,product,BUY|SELL,quantity,price,state``.
"""

from __future__ import annotations

from bond_pipeline.core.connector import LineConnector
from bond_pipeline.domain.errors import RecordParseError
from bond_pipeline.domain.inquiries import Inquiry
from bond_pipeline.domain.types import InquiryState, TradeSide
from bond_pipeline.reference.bonds import BondReference
from bond_pipeline.reference.price_format import parse_price


class InquiryConnector(LineConnector[Inquiry]):
    """Parses inquiry lines into Inquiry values."""

    source = "inquiries"
    field_count = 6

    def __init__(self, reference: BondReference) -> None:
        self._reference = reference

    def parse_line(self, line: str) -> Inquiry:
        inquiry_id, product_id, side_str, qty_str, price_str, state_str = self.split(line)
        try:
            side = TradeSide(side_str.upper())
            state = InquiryState(state_str.upper())
        except ValueError as e:
            raise RecordParseError(f"Invalid inquiry field: {e}", line=line) from None

        return Inquiry(
            inquiry_id=inquiry_id,
            product=self._reference.resolve_product(product_id),
            side=side,
            quantity=self.parse_int(qty_str, line),
            price=parse_price(price_str),
            state=state,
        )
