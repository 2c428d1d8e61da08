"""Base class for input file connectors.

A connector turns one comma-separated input line into a domain value.
Connectors never touch stores; the pipeline replay loop hands parsed
values to the owning stage.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from pathlib import Path
from typing import Generic, TypeVar

from bond_pipeline.domain.errors import RecordParseError

T = TypeVar("T")


class LineConnector(ABC, Generic[T]):
    """Parses input records of a single type."""

    #: Source name used in logs and metrics
    source: str = "records"

    #: Number of comma-separated fields per line
    field_count: int = 0

    @abstractmethod
    def parse_line(self, line: str) -> T | None:
        """Parse one input line.

        Args:
            line: Raw line (trailing newline and carriage return allowed)

        Returns:
            Parsed value, or None when the line completes no value yet

        Raises:
            RecordParseError: If the line is malformed
        """

    def split(self, line: str) -> list[str]:
        """Split a line into stripped fields and check the field count.

        Raises:
            RecordParseError: If the number of fields is wrong
        """
        fields = [f.strip() for f in line.rstrip("\r\n").split(",")]
        if len(fields) != self.field_count:
            raise RecordParseError(
                f"Expected {self.field_count} fields in {self.source} record, "
                f"got {len(fields)}",
                line=line,
            )
        return fields

    def parse_int(self, text: str, line: str) -> int:
        """Parse an integer field.

        Raises:
            RecordParseError: If the field is not an integer
        """
        try:
            return int(text)
        except ValueError:
            raise RecordParseError(f"Invalid integer: {text!r}", line=line) from None

    @staticmethod
    def read_lines(path: str | Path) -> Iterator[tuple[int, str]]:
        """Yield (line number, line) for every non-blank line of a file.

        Line numbers start at 1.
        """
        with open(path, encoding="utf-8") as f:
            for number, line in enumerate(f, start=1):
                line = line.rstrip("\r\n")
                if line.strip():
                    yield number, line
