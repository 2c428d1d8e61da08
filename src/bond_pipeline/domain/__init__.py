"""Domain models for the trading pipeline.

This package contains the values that flow between pipeline stages.
All models are immutable and use Decimal for prices.
"""

from bond_pipeline.domain.errors import (
    ConfigurationError,
    EmptyBookError,
    NotFoundError,
    PipelineFrozenError,
    RecordParseError,
    TradingError,
)
from bond_pipeline.domain.inquiries import Inquiry
from bond_pipeline.domain.market_data import BidOffer, Order, OrderBook
from bond_pipeline.domain.orders import AlgoExecution, ExecutionOrder
from bond_pipeline.domain.positions import Position, merge_positions
from bond_pipeline.domain.pricing import AlgoStream, Price, PriceStream, PriceStreamOrder
from bond_pipeline.domain.products import Bond
from bond_pipeline.domain.risk import PV01, BucketedSector
from bond_pipeline.domain.trades import Trade
from bond_pipeline.domain.types import (
    BondIdType,
    InquiryState,
    Market,
    OrderType,
    PricingSide,
    TradeSide,
)

__all__ = [
    # Types
    "BondIdType",
    "InquiryState",
    "Market",
    "OrderType",
    "PricingSide",
    "TradeSide",
    # Products
    "Bond",
    # Market Data
    "BidOffer",
    "Order",
    "OrderBook",
    # Pricing
    "AlgoStream",
    "Price",
    "PriceStream",
    "PriceStreamOrder",
    # Orders and Trades
    "AlgoExecution",
    "ExecutionOrder",
    "Trade",
    # Positions and Risk
    "BucketedSector",
    "PV01",
    "Position",
    "merge_positions",
    # Inquiries
    "Inquiry",
    # Errors
    "ConfigurationError",
    "EmptyBookError",
    "NotFoundError",
    "PipelineFrozenError",
    "RecordParseError",
    "TradingError",
]
