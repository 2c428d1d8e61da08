"""Trade booking module."""

from bond_pipeline.booking.connector import TradeConnector
from bond_pipeline.booking.service import (
    DEFAULT_BOOKS,
    ExecutionBookingListener,
    TradeBookingService,
)

__all__ = [
    "DEFAULT_BOOKS",
    "ExecutionBookingListener",
    "TradeBookingService",
    "TradeConnector",
]
