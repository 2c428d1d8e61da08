"""Prometheus metrics for pipeline monitoring.

Provides counters for:
- Input records replayed and skipped, per source
- Messages emitted by each pipeline stage
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

from prometheus_client import CollectorRegistry, Counter, generate_latest

logger = logging.getLogger(__name__)


class PipelineMetrics:
    """Collects and exposes pipeline metrics.

    Each instance owns its registry so several pipelines (and tests) can
    coexist in one process.
    """

    def __init__(self, prefix: str = "bond_pipeline") -> None:
        """Initialize metrics.

        Args:
            prefix: Metric name prefix
        """
        self._prefix = prefix
        self._registry = CollectorRegistry()

        self._records_replayed = Counter(
            f"{prefix}_records_replayed",
            "Input records processed",
            ["source"],
            registry=self._registry,
        )

        self._records_failed = Counter(
            f"{prefix}_records_failed",
            "Input records skipped after an error",
            ["source", "error"],
            registry=self._registry,
        )

        self._stage_messages = Counter(
            f"{prefix}_stage_messages",
            "Messages emitted by a pipeline stage",
            ["stage"],
            registry=self._registry,
        )

    @property
    def registry(self) -> CollectorRegistry:
        """Return the metrics registry."""
        return self._registry

    def record_replayed(self, source: str) -> None:
        """Count a processed input record."""
        self._records_replayed.labels(source=source).inc()

    def record_failed(self, source: str, error: str) -> None:
        """Count a skipped input record."""
        self._records_failed.labels(source=source, error=error).inc()

    def stage_listener(self, stage: str) -> Callable[[Any], None]:
        """Return a listener counting the messages of a stage."""
        counter = self._stage_messages.labels(stage=stage)

        def count(_value: Any) -> None:
            counter.inc()

        return count

    def value(self, name: str, **labels: str) -> float:
        """Return the current value of a counter sample (0 if absent).

        Args:
            name: Metric name without prefix, e.g. "records_replayed"
            labels: Label values
        """
        sample = self._registry.get_sample_value(f"{self._prefix}_{name}_total", labels)
        return sample or 0.0

    def render(self) -> str:
        """Return the text exposition of all metrics."""
        return generate_latest(self._registry).decode("utf-8")

    def write(self, path: str | Path) -> None:
        """Write the text exposition to a file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.render())
        logger.info(f"Metrics written to {path}")
