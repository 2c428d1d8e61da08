"""Core pipeline machinery.

Keyed stores, the listener graph and configuration. The replay driver
lives in bond_pipeline.core.pipeline, which imports every stage package
and so is not re-exported here.
"""

from bond_pipeline.core.config import PipelineConfig, load_config
from bond_pipeline.core.store import KeyedStore, replace
from bond_pipeline.core.wiring import Edge, ListenerGraph

__all__ = [
    "Edge",
    "KeyedStore",
    "ListenerGraph",
    "PipelineConfig",
    "load_config",
    "replace",
]
