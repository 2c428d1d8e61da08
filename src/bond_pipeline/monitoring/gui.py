"""Throttled price snapshots for a GUI feed.

GUIService listens to pricing, keeps every price it sees and forwards a
price to its own listeners at most once per throttle interval.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from bond_pipeline.core.store import KeyedStore
from bond_pipeline.domain.pricing import Price

logger = logging.getLogger(__name__)

Clock = Callable[[], int]


def monotonic_ms() -> int:
    """Return a monotonic clock reading in milliseconds."""
    return time.monotonic_ns() // 1_000_000


class GUIService(KeyedStore[str, Price]):
    """Price store keyed by product id with throttled publication."""

    def __init__(self, throttle_ms: int = 300, clock: Clock = monotonic_ms) -> None:
        """Initialize service.

        Args:
            throttle_ms: Minimum milliseconds between published prices
            clock: Millisecond clock
        """
        super().__init__(key=lambda price: price.product_id, name="gui")
        self._throttle_ms = throttle_ms
        self._clock = clock
        self._last_published: int | None = None
        self._dropped = 0

    @property
    def dropped(self) -> int:
        """Return prices stored but not published."""
        return self._dropped

    def on_price(self, price: Price) -> bool:
        """Store a price and publish it if the throttle interval has passed.

        Args:
            price: Latest price

        Returns:
            True if the price was published
        """
        self.put(price)
        now = self._clock()
        if self._last_published is not None and now - self._last_published < self._throttle_ms:
            self._dropped += 1
            return False

        self._last_published = now
        self.publish(price)
        return True
