"""Recording module.

Provides historical data persistence and read-back.
"""

from bond_pipeline.recording.events import HistoryRecord, HistoryType
from bond_pipeline.recording.recorder import (
    HistoricalDataService,
    HistoryReader,
    HistoryRecorder,
)

__all__ = [
    "HistoricalDataService",
    "HistoryReader",
    "HistoryRecord",
    "HistoryRecorder",
    "HistoryType",
]
