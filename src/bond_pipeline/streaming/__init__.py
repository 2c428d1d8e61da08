"""Quote streaming module.

Two-sided quote construction and publication.
"""

from bond_pipeline.streaming.algo import AlgoStreamingService
from bond_pipeline.streaming.service import StreamingService

__all__ = [
    "AlgoStreamingService",
    "StreamingService",
]
