"""Price line connector.

Lines have the form ``product,bid,offer`` with fractional prices.
"""

from __future__ import annotations

from bond_pipeline.core.connector import LineConnector
from bond_pipeline.domain.errors import RecordParseError
from bond_pipeline.domain.pricing import Price
from bond_pipeline.reference.bonds import BondReference
from bond_pipeline.reference.price_format import parse_price


class PriceConnector(LineConnector[Price]):
    """Parses price lines into Price values."""

    source = "prices"
    field_count = 3

    def __init__(self, reference: BondReference) -> None:
        self._reference = reference

    def parse_line(self, line: str) -> Price:
        product_id, bid_str, offer_str = self.split(line)
        bid = parse_price(bid_str)
        offer = parse_price(offer_str)
        if offer < bid:
            raise RecordParseError(
                f"Offer {offer_str} below bid {bid_str} for {product_id}", line=line
            )
        return Price.from_bid_offer(self._reference.resolve_product(product_id), bid, offer)
