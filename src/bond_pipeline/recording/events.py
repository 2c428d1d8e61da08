"""History record types.

Defines the record written for every value a historical stage persists.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any


class HistoryType(str, Enum):
    """Kinds of persisted values, one history file each."""

    POSITION = "position"
    RISK = "risk"
    EXECUTION = "execution"
    STREAMING = "streaming"
    INQUIRY = "inquiry"
    GUI = "gui"

    @property
    def file_stem(self) -> str:
        """Return the history file name without extension."""
        return _FILE_STEMS[self]


_FILE_STEMS = {
    HistoryType.POSITION: "positions",
    HistoryType.RISK: "risk",
    HistoryType.EXECUTION: "executions",
    HistoryType.STREAMING: "streaming",
    HistoryType.INQUIRY: "allinquiries",
    HistoryType.GUI: "gui",
}


@dataclass(frozen=True)
class HistoryRecord:
    """One persisted value.

    Attributes:
        record_type: Kind of value
        timestamp: When the value was persisted
        key: Store key of the value (product id, order id, inquiry id)
        data: Formatted fields, JSON-serializable after to_dict()
    """

    record_type: HistoryType
    timestamp: datetime
    key: str
    data: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "record_type": self.record_type.value,
            "timestamp": self.timestamp.isoformat(),
            "key": self.key,
            "data": self._serialize(self.data),
        }

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> HistoryRecord:
        """Create from dictionary."""
        return cls(
            record_type=HistoryType(d["record_type"]),
            timestamp=datetime.fromisoformat(d["timestamp"]),
            key=d["key"],
            data=d.get("data", {}),
        )

    def _serialize(self, value: Any) -> Any:
        if isinstance(value, Decimal):
            return str(value)
        elif isinstance(value, datetime):
            return value.isoformat()
        elif isinstance(value, Enum):
            return value.value
        elif isinstance(value, dict):
            return {k: self._serialize(v) for k, v in value.items()}
        elif isinstance(value, list):
            return [self._serialize(item) for item in value]
        return value
