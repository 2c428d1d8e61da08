"""Streaming service: publishes the quotes produced by the algorithm."""

from __future__ import annotations

from bond_pipeline.core.store import KeyedStore
from bond_pipeline.domain.pricing import AlgoStream, PriceStream


class StreamingService(KeyedStore[str, PriceStream]):
    """Price stream store keyed by product id."""

    def __init__(self) -> None:
        super().__init__(key=lambda stream: stream.product_id, name="streaming")

    def publish_price(self, price_stream: PriceStream) -> PriceStream:
        """Store a two-way quote and notify listeners."""
        return self.on_message(price_stream)

    def on_algo_stream(self, algo_stream: AlgoStream) -> None:
        """Listener for the quoting algorithm."""
        self.publish_price(algo_stream.price_stream)
