"""Declarative listener graph.

The pipeline topology is described as a list of edges, each connecting
a producer store to a consumer callback. The graph is assembled once
before replay starts; after assembly every producer is sealed and the
graph can no longer change.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from bond_pipeline.core.store import KeyedStore
from bond_pipeline.domain.errors import PipelineFrozenError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Edge:
    """A directed edge: messages from producer are passed to consumer.

    Attributes:
        producer: Store whose messages are forwarded
        consumer: Callback receiving each stored value
        label: Human-readable consumer name
    """

    producer: KeyedStore[Any, Any]
    consumer: Callable[[Any], None]
    label: str

    def describe(self) -> str:
        """Return 'producer -> consumer'."""
        return f"{self.producer.name} -> {self.label}"


class ListenerGraph:
    """Fixed set of producer -> consumer edges.

    Edges are registered on their producers in declaration order, so
    consumers of the same producer are notified in the order they were
    declared.
    """

    def __init__(self, edges: Iterable[Edge] = ()) -> None:
        """Initialize with an optional initial edge list.

        Args:
            edges: Edges to declare, in notification order
        """
        self._edges: list[Edge] = list(edges)
        self._frozen = False

    @property
    def edges(self) -> tuple[Edge, ...]:
        """Return all declared edges."""
        return tuple(self._edges)

    @property
    def frozen(self) -> bool:
        """Return True once the graph has been assembled."""
        return self._frozen

    def connect(
        self,
        producer: KeyedStore[Any, Any],
        consumer: Callable[[Any], None],
        label: str | None = None,
    ) -> Edge:
        """Declare an edge.

        Args:
            producer: Store whose messages are forwarded
            consumer: Callback receiving each stored value
            label: Consumer name (defaults to the callback's qualified name)

        Returns:
            The declared edge

        Raises:
            PipelineFrozenError: If the graph has already been assembled
        """
        if self._frozen:
            raise PipelineFrozenError("Cannot connect: listener graph is frozen")
        edge = Edge(
            producer=producer,
            consumer=consumer,
            label=label or getattr(consumer, "__qualname__", repr(consumer)),
        )
        self._edges.append(edge)
        return edge

    def assemble(self) -> None:
        """Register every edge on its producer and freeze the graph.

        Raises:
            PipelineFrozenError: If the graph was already assembled
        """
        if self._frozen:
            raise PipelineFrozenError("Listener graph already assembled")

        for edge in self._edges:
            edge.producer.add_listener(edge.consumer)
            logger.debug(f"Linked {edge.describe()}")

        for producer in self.producers():
            producer.seal()

        self._frozen = True
        logger.info(f"Listener graph assembled: {len(self._edges)} edges")

    def producers(self) -> list[KeyedStore[Any, Any]]:
        """Return distinct producers in first-declared order."""
        seen: dict[int, KeyedStore[Any, Any]] = {}
        for edge in self._edges:
            seen.setdefault(id(edge.producer), edge.producer)
        return list(seen.values())

    def adjacency(self) -> dict[str, list[str]]:
        """Return producer name -> consumer labels, in notification order."""
        result: dict[str, list[str]] = {}
        for edge in self._edges:
            result.setdefault(edge.producer.name, []).append(edge.label)
        return result
