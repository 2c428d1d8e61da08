"""Core enumerations for the trading pipeline.

These types are shared by every stage. Order book quotes carry a
PricingSide (BID/OFFER), booked trades and inquiries carry a TradeSide
(BUY/SELL).
"""

from __future__ import annotations

from enum import Enum


class PricingSide(str, Enum):
    """Side of a resting quote: BID or OFFER."""

    BID = "BID"
    OFFER = "OFFER"

    def opposite(self) -> PricingSide:
        """Return the opposite pricing side."""
        return PricingSide.OFFER if self == PricingSide.BID else PricingSide.BID


class TradeSide(str, Enum):
    """Trade direction: BUY or SELL."""

    BUY = "BUY"
    SELL = "SELL"

    def opposite(self) -> TradeSide:
        """Return the opposite trade side."""
        return TradeSide.SELL if self == TradeSide.BUY else TradeSide.BUY

    def sign(self) -> int:
        """Return +1 for BUY and -1 for SELL."""
        return 1 if self == TradeSide.BUY else -1


class OrderType(str, Enum):
    """Execution order types."""

    FOK = "FOK"
    IOC = "IOC"
    MARKET = "MARKET"
    LIMIT = "LIMIT"
    STOP = "STOP"


class Market(str, Enum):
    """Execution venues."""

    BROKERTEC = "BROKERTEC"
    ESPEED = "ESPEED"
    CME = "CME"


class InquiryState(str, Enum):
    """Customer inquiry lifecycle states.

    State transitions:
    - RECEIVED -> QUOTED (quote sent)
    - QUOTED -> DONE (customer accepted)
    - RECEIVED -> REJECTED (we declined)
    - RECEIVED -> CUSTOMER_REJECTED (customer declined)
    """

    RECEIVED = "RECEIVED"
    QUOTED = "QUOTED"
    DONE = "DONE"
    REJECTED = "REJECTED"
    CUSTOMER_REJECTED = "CUSTOMER_REJECTED"

    def is_terminal(self) -> bool:
        """Return True if no further transitions are expected."""
        return self in (
            InquiryState.DONE,
            InquiryState.REJECTED,
            InquiryState.CUSTOMER_REJECTED,
        )


class BondIdType(str, Enum):
    """Identifier schemes for bonds."""

    CUSIP = "CUSIP"
    ISIN = "ISIN"
