"""Historical data persistence.

HistoryRecorder appends one JSON line per persisted value to a file per
record type. HistoricalDataService is the pipeline stage in front of it:
it keeps the latest persisted value per key and writes every value it
receives. HistoryReader reads a history file back.

The latest value per key is the last one delivered, which is not always
the upstream store's current value. An inquiry that is auto-quoted reaches
history as QUOTED, DONE and then RECEIVED, so its history entry ends on
RECEIVED while the inquiry store holds DONE.
"""

from __future__ import annotations

import gzip
import json
import logging
from collections.abc import Iterator
from datetime import UTC, datetime
from pathlib import Path
from typing import IO, Any

from bond_pipeline.core.store import KeyedStore
from bond_pipeline.recording.events import HistoryRecord, HistoryType
from bond_pipeline.recording.formatters import FORMATTERS, Formatter

logger = logging.getLogger(__name__)


class HistoryRecorder:
    """Writes history records to JSONL files, optionally gzip compressed.

    Files are opened lazily in append mode on the first record of each
    type and stay open until close().
    """

    def __init__(
        self,
        output_dir: str | Path = "./data/out",
        compress: bool = False,
        flush_interval: int = 100,
    ) -> None:
        """Initialize recorder.

        Args:
            output_dir: Directory for history files
            compress: Write .jsonl.gz instead of .jsonl
            flush_interval: Flush a file every N records
        """
        self._output_dir = Path(output_dir)
        self._compress = compress
        self._flush_interval = flush_interval
        self._files: dict[HistoryType, IO[str]] = {}
        self._counts: dict[HistoryType, int] = {}

    @property
    def output_dir(self) -> Path:
        """Get output directory."""
        return self._output_dir

    def file_path(self, record_type: HistoryType) -> Path:
        """Return the history file for a record type."""
        suffix = ".jsonl.gz" if self._compress else ".jsonl"
        return self._output_dir / f"{record_type.file_stem}{suffix}"

    def count(self, record_type: HistoryType) -> int:
        """Return records written for a type."""
        return self._counts.get(record_type, 0)

    def record(self, record: HistoryRecord) -> None:
        """Append a record to its history file.

        Args:
            record: Record to write
        """
        f = self._files.get(record.record_type)
        if f is None:
            f = self._open(record.record_type)

        f.write(json.dumps(record.to_dict()) + "\n")
        count = self._counts.get(record.record_type, 0) + 1
        self._counts[record.record_type] = count

        if count % self._flush_interval == 0:
            f.flush()

    def close(self) -> None:
        """Close all open history files."""
        for record_type, f in self._files.items():
            f.close()
            logger.info(
                f"History {record_type.value}: {self.count(record_type)} records "
                f"-> {self.file_path(record_type)}"
            )
        self._files.clear()

    def _open(self, record_type: HistoryType) -> IO[str]:
        self._output_dir.mkdir(parents=True, exist_ok=True)
        path = self.file_path(record_type)
        f: IO[str]
        if self._compress:
            f = gzip.open(path, "at", encoding="utf-8")
        else:
            f = open(path, "a", encoding="utf-8")
        self._files[record_type] = f
        logger.debug(f"Opened history file {path}")
        return f

    def __enter__(self) -> HistoryRecorder:
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()


class HistoryReader:
    """Reads history records back from a JSONL or JSONL.gz file."""

    def __init__(self, file_path: str | Path) -> None:
        """Initialize reader.

        Args:
            file_path: Path to history file
        """
        self._file_path = Path(file_path)

    def records(self) -> Iterator[HistoryRecord]:
        """Yield records in file order."""
        opener = gzip.open if self._file_path.suffix == ".gz" else open
        with opener(self._file_path, "rt", encoding="utf-8") as f:
            for line in f:
                line = line.strip()
                if line:
                    yield HistoryRecord.from_dict(json.loads(line))

    def latest(self) -> dict[str, HistoryRecord]:
        """Return the last record per key."""
        return {record.key: record for record in self.records()}


class HistoricalDataService(KeyedStore[str, Any]):
    """Terminal stage persisting every value it receives.

    One instance exists per record type; it is attached as a listener
    to the stage whose output it records.
    """

    def __init__(
        self,
        record_type: HistoryType,
        recorder: HistoryRecorder,
        formatter: Formatter | None = None,
    ) -> None:
        """Initialize service.

        Args:
            record_type: Kind of value persisted
            recorder: Destination for records
            formatter: Value -> (key, fields); defaults to the type's formatter
        """
        self._formatter = formatter or FORMATTERS[record_type]
        super().__init__(
            key=lambda value: self._formatter(value)[0],
            name=f"history.{record_type.value}",
        )
        self._record_type = record_type
        self._recorder = recorder

    @property
    def record_type(self) -> HistoryType:
        """Return the persisted record type."""
        return self._record_type

    def persist_data(self, value: Any) -> HistoryRecord:
        """Store a value and append it to the history file.

        Args:
            value: Domain value emitted by the upstream stage

        Returns:
            The written record
        """
        key, fields = self._formatter(value)
        self.put(value)
        record = HistoryRecord(
            record_type=self._record_type,
            timestamp=datetime.now(UTC),
            key=key,
            data=fields,
        )
        self._recorder.record(record)
        return record
