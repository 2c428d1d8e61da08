"""Exception hierarchy for pipeline errors.

All pipeline errors inherit from TradingError, allowing the replay loop
to skip a failed input record while letting programming errors through.
Each error type carries relevant context for logging.

Error categories:
- NotFoundError: Lookup of an absent key in a keyed store
- EmptyBookError: Best bid/offer requested on an empty stack
- RecordParseError: Malformed input line or price string
- PipelineFrozenError: Wiring change attempted after assembly
- ConfigurationError: Invalid configuration
"""

from __future__ import annotations

from typing import Any


class TradingError(Exception):
    """Base exception for all pipeline errors.

    Listener cascades never catch these; they propagate to the call that
    started the cascade.
    """

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        """Initialize with message and optional context.

        Args:
            message: Human-readable error description
            context: Additional structured data for logging/debugging
        """
        super().__init__(message)
        self.context = context or {}


class NotFoundError(TradingError):
    """Key not present in a keyed store."""

    def __init__(
        self,
        key: str,
        store: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        """Initialize with the missing key.

        Args:
            key: The key that was looked up
            store: Name of the store that was searched
            context: Additional structured data
        """
        where = f" in {store}" if store else ""
        super().__init__(f"Key not found{where}: {key}", context)
        self.key = key
        self.store = store


class EmptyBookError(TradingError):
    """Order book has no orders on a side.

    Raised when best bid/offer is requested and either the bid or the
    offer stack is empty.
    """

    def __init__(
        self,
        product_id: str,
        side: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        """Initialize with the product and empty side.

        Args:
            product_id: Product whose book is empty
            side: The empty side (BID or OFFER)
            context: Additional structured data
        """
        which = f"{side} stack" if side else "Bid or offer stack"
        super().__init__(f"{which} is empty for product: {product_id}", context)
        self.product_id = product_id
        self.side = side


class RecordParseError(TradingError):
    """Input record could not be parsed."""

    def __init__(
        self,
        message: str,
        line: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        """Initialize with the offending line.

        Args:
            message: Human-readable error description
            line: Raw input line, if available
            context: Additional structured data
        """
        super().__init__(message, context)
        self.line = line


class PipelineFrozenError(TradingError):
    """Listener registration attempted after the wiring graph was frozen."""


class ConfigurationError(TradingError):
    """Invalid configuration.

    Raised when:
    - Configuration file is malformed
    - Configuration values fail semantic validation
    """

    def __init__(
        self,
        message: str,
        field: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        """Initialize with field information.

        Args:
            message: Human-readable error description
            field: Name of the configuration field with the issue
            context: Additional structured data
        """
        super().__init__(message, context)
        self.field = field
