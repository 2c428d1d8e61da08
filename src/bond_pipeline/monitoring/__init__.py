"""Monitoring module.

Throttled GUI price feed and Prometheus metrics.
"""

from bond_pipeline.monitoring.gui import GUIService, monotonic_ms
from bond_pipeline.monitoring.metrics import PipelineMetrics

__all__ = [
    "GUIService",
    "PipelineMetrics",
    "monotonic_ms",
]
