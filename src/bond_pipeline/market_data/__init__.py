"""Market data module.

Order book snapshots, best bid/offer and depth aggregation.
"""

from bond_pipeline.market_data.connector import MarketDataConnector
from bond_pipeline.market_data.service import (
    MarketDataService,
    aggregate_depth,
    best_bid_offer,
)

__all__ = [
    "MarketDataConnector",
    "MarketDataService",
    "aggregate_depth",
    "best_bid_offer",
]
