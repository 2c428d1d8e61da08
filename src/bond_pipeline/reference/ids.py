"""Order id generation."""

from __future__ import annotations

from collections.abc import Callable
from uuid import uuid4

OrderIdFactory = Callable[[], str]


def new_order_id() -> str:
    """Return a random order id, unique within a run."""
    return f"ALGO-{uuid4().hex[:16]}"


class SequentialIds:
    """Deterministic id factory: PREFIX1, PREFIX2, ..."""

    def __init__(self, prefix: str = "ORD") -> None:
        self._prefix = prefix
        self._count = 0

    def __call__(self) -> str:
        self._count += 1
        return f"{self._prefix}{self._count}"
