"""Keyed store with synchronous listener fan-out.

Every pipeline stage is built on KeyedStore: a map from key to the
latest value, plus an ordered list of listeners notified on each message.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Generic, TypeVar

from bond_pipeline.domain.errors import NotFoundError, PipelineFrozenError

K = TypeVar("K")
V = TypeVar("V")

Listener = Callable[[V], None]
MergeStrategy = Callable[[V, V], V]


def replace(existing: V, incoming: V) -> V:  # noqa: ARG001
    """Default merge strategy: the incoming value wins outright."""
    return incoming


class KeyedStore(Generic[K, V]):
    """Upsert-and-notify store.

    on_message() derives the key from the value, stores it (replacing or
    merging with any existing value) and then calls every listener with
    the stored value, in registration order, before returning.

    Listener failures are not isolated: an exception raised by a listener
    stops the remaining listeners for that message and propagates to the
    caller of on_message().

    Thread-safety: This class is NOT thread-safe. The pipeline is driven
    by a single sequential replay.
    """

    def __init__(
        self,
        key: Callable[[V], K],
        merge: MergeStrategy[V] = replace,
        name: str | None = None,
    ) -> None:
        """Initialize the store.

        Args:
            key: Extracts the store key from a value
            merge: Combines (existing, incoming) into the value to store
            name: Store name used in errors and logs
        """
        self._key = key
        self._merge = merge
        self._name = name or type(self).__name__
        self._data: dict[K, V] = {}
        self._listeners: list[Listener[V]] = []
        self._sealed = False

    @property
    def name(self) -> str:
        """Return the store name."""
        return self._name

    @property
    def listeners(self) -> list[Listener[V]]:
        """Return registered listeners in notification order."""
        return list(self._listeners)

    @property
    def sealed(self) -> bool:
        """Return True once listener registration is closed."""
        return self._sealed

    def get(self, key: K) -> V:
        """Return the value stored under key.

        Raises:
            NotFoundError: If the key is absent
        """
        try:
            return self._data[key]
        except KeyError:
            raise NotFoundError(str(key), store=self._name) from None

    def put(self, value: V) -> V:
        """Store a value without notifying listeners.

        Args:
            value: Value to store

        Returns:
            The value now held in the store (merged if a merge strategy applies)
        """
        key = self._key(value)
        existing = self._data.get(key)
        stored = value if existing is None else self._merge(existing, value)
        self._data[key] = stored
        return stored

    def on_message(self, value: V) -> V:
        """Store a value and notify every listener with the stored value.

        Args:
            value: Incoming value

        Returns:
            The value now held in the store
        """
        stored = self.put(value)
        self.publish(stored)
        return stored

    def publish(self, value: V) -> None:
        """Notify listeners without touching the store."""
        for listener in self._listeners:
            listener(value)

    def add_listener(self, listener: Listener[V]) -> None:
        """Append a listener. No removal and no deduplication.

        Raises:
            PipelineFrozenError: If the store has been sealed
        """
        if self._sealed:
            raise PipelineFrozenError(
                f"Cannot add listener to {self._name}: wiring is frozen"
            )
        self._listeners.append(listener)

    def seal(self) -> None:
        """Close listener registration for the rest of the run."""
        self._sealed = True

    def keys(self) -> list[K]:
        """Return stored keys in insertion order."""
        return list(self._data)

    def values(self) -> list[V]:
        """Return stored values in insertion order."""
        return list(self._data.values())

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[K]:
        return iter(list(self._data))
