"""Configuration models for the trading pipeline.

Loads and validates configuration from YAML files using pydantic.
"""

from __future__ import annotations

from decimal import Decimal
from enum import Enum
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

from bond_pipeline.domain.errors import ConfigurationError
from bond_pipeline.domain.types import Market
from bond_pipeline.reference.bonds import DEFAULT_SECTORS


class Compression(str, Enum):
    """History file compression."""

    NONE = "none"
    GZIP = "gzip"


class MarketDataConfig(BaseModel):
    """Order book ingestion configuration."""

    book_depth: int = 5  # Levels per side; a snapshot every 2 * depth lines


class ExecutionConfig(BaseModel):
    """Algorithmic execution configuration."""

    spread_threshold: Decimal = Decimal(1) / Decimal(128)
    market: Market = Market.CME


class StreamingConfig(BaseModel):
    """Algorithmic quote streaming configuration."""

    visible_sizes: list[int] = Field(default_factory=lambda: [10_000_000, 20_000_000])
    hidden_ratio: int = 2


class BookingConfig(BaseModel):
    """Trade booking configuration."""

    books: list[str] = Field(default_factory=lambda: ["TRSY1", "TRSY2", "TRSY3"])


class InquiryConfig(BaseModel):
    """Inquiry handling configuration."""

    quote_price: Decimal = Decimal("100")


class GUIConfig(BaseModel):
    """Throttled price snapshot configuration."""

    enabled: bool = True
    throttle_ms: int = 300


class RiskConfig(BaseModel):
    """Risk aggregation configuration."""

    sectors: dict[str, list[str]] = Field(
        default_factory=lambda: {name: list(ids) for name, ids in DEFAULT_SECTORS.items()}
    )


class InputsConfig(BaseModel):
    """Input file locations."""

    data_dir: str = "./data"
    prices_file: str = "prices.txt"
    trades_file: str = "trades.txt"
    market_data_file: str = "mktdata.txt"
    inquiries_file: str = "inquiries.txt"

    def path(self, file_name: str) -> Path:
        """Return a file path inside the data directory."""
        return Path(self.data_dir) / file_name


class HistoryConfig(BaseModel):
    """Historical data persistence configuration."""

    enabled: bool = True
    output_dir: str = "./data/out"
    compression: Compression = Compression.NONE


class PipelineConfig(BaseModel):
    """Root configuration for the trading pipeline."""

    market_data: MarketDataConfig = Field(default_factory=MarketDataConfig)
    execution: ExecutionConfig = Field(default_factory=ExecutionConfig)
    streaming: StreamingConfig = Field(default_factory=StreamingConfig)
    booking: BookingConfig = Field(default_factory=BookingConfig)
    inquiry: InquiryConfig = Field(default_factory=InquiryConfig)
    gui: GUIConfig = Field(default_factory=GUIConfig)
    risk: RiskConfig = Field(default_factory=RiskConfig)
    inputs: InputsConfig = Field(default_factory=InputsConfig)
    history: HistoryConfig = Field(default_factory=HistoryConfig)

    # Logging
    log_level: str = "INFO"
    log_file: str | None = None

    # Metrics exposition output
    metrics_file: str | None = None

    def validate_semantics(self) -> None:
        """Check values pydantic cannot express as types.

        Raises:
            ConfigurationError: If a value is out of range
        """
        if self.market_data.book_depth < 1:
            raise ConfigurationError(
                "book_depth must be at least 1", field="market_data.book_depth"
            )
        if self.execution.spread_threshold < 0:
            raise ConfigurationError(
                "spread_threshold must not be negative",
                field="execution.spread_threshold",
            )
        if not self.streaming.visible_sizes:
            raise ConfigurationError(
                "visible_sizes must not be empty", field="streaming.visible_sizes"
            )
        if any(size <= 0 for size in self.streaming.visible_sizes):
            raise ConfigurationError(
                "visible_sizes must be positive", field="streaming.visible_sizes"
            )
        if self.streaming.hidden_ratio < 0:
            raise ConfigurationError(
                "hidden_ratio must not be negative", field="streaming.hidden_ratio"
            )
        if not self.booking.books:
            raise ConfigurationError("books must not be empty", field="booking.books")
        if self.gui.throttle_ms < 0:
            raise ConfigurationError(
                "throttle_ms must not be negative", field="gui.throttle_ms"
            )

    @classmethod
    def from_yaml(cls, path: str | Path) -> PipelineConfig:
        """Load configuration from a YAML file.

        Args:
            path: Path to the YAML configuration file

        Returns:
            Validated PipelineConfig

        Raises:
            FileNotFoundError: If the config file doesn't exist
            ValidationError: If the config is invalid
            ConfigurationError: If a value is out of range
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f)

        return cls.from_dict(data or {})

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PipelineConfig:
        """Load configuration from a dictionary.

        Args:
            data: Configuration dictionary

        Returns:
            Validated PipelineConfig
        """
        config = cls.model_validate(data)
        config.validate_semantics()
        return config

    def to_yaml(self, path: str | Path) -> None:
        """Save configuration to a YAML file.

        Args:
            path: Path to write the configuration
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w") as f:
            yaml.dump(self.model_dump(mode="json"), f, default_flow_style=False)


def load_config(path: str | Path | None = None) -> PipelineConfig:
    """Load pipeline configuration.

    Looks for config in the following order:
    1. Provided path argument
    2. ./config/pipeline.yaml
    3. ./config/config.yaml
    4. ./pipeline.yaml
    5. Default configuration

    Args:
        path: Optional explicit path to config file

    Returns:
        Validated PipelineConfig
    """
    if path:
        return PipelineConfig.from_yaml(path)

    default_paths = [
        Path("./config/pipeline.yaml"),
        Path("./config/config.yaml"),
        Path("./pipeline.yaml"),
    ]

    for default_path in default_paths:
        if default_path.exists():
            return PipelineConfig.from_yaml(default_path)

    return PipelineConfig()
