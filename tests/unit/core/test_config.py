"""Tests for pipeline configuration."""

from decimal import Decimal
from pathlib import Path

import pytest
from pydantic import ValidationError

from bond_pipeline.core.config import Compression, PipelineConfig, load_config
from bond_pipeline.domain.errors import ConfigurationError
from bond_pipeline.domain.types import Market


class TestPipelineConfig:
    """Tests for PipelineConfig."""

    def test_defaults(self) -> None:
        """Defaults should match the Treasury desk setup."""
        config = PipelineConfig()

        assert config.market_data.book_depth == 5
        assert config.execution.spread_threshold == Decimal(1) / Decimal(128)
        assert config.execution.market == Market.CME
        assert config.streaming.visible_sizes == [10_000_000, 20_000_000]
        assert config.streaming.hidden_ratio == 2
        assert config.booking.books == ["TRSY1", "TRSY2", "TRSY3"]
        assert config.inquiry.quote_price == Decimal("100")
        assert config.gui.throttle_ms == 300
        assert list(config.risk.sectors) == ["FrontEnd", "Belly", "LongEnd"]
        assert config.history.compression == Compression.NONE

    def test_from_dict(self) -> None:
        """Should override nested values."""
        config = PipelineConfig.from_dict(
            {
                "market_data": {"book_depth": 3},
                "booking": {"books": ["A", "B"]},
                "history": {"compression": "gzip"},
            }
        )

        assert config.market_data.book_depth == 3
        assert config.booking.books == ["A", "B"]
        assert config.history.compression == Compression.GZIP

    def test_invalid_type_raises_validation_error(self) -> None:
        """Wrong types should raise pydantic ValidationError."""
        with pytest.raises(ValidationError):
            PipelineConfig.from_dict({"market_data": {"book_depth": "deep"}})

    @pytest.mark.parametrize(
        "data, field",
        [
            ({"market_data": {"book_depth": 0}}, "market_data.book_depth"),
            ({"streaming": {"visible_sizes": []}}, "streaming.visible_sizes"),
            ({"booking": {"books": []}}, "booking.books"),
            ({"gui": {"throttle_ms": -1}}, "gui.throttle_ms"),
        ],
    )
    def test_semantic_errors(self, data: dict, field: str) -> None:
        """Out-of-range values should raise ConfigurationError."""
        with pytest.raises(ConfigurationError) as exc_info:
            PipelineConfig.from_dict(data)

        assert exc_info.value.field == field

    def test_yaml_round_trip(self, tmp_path: Path) -> None:
        """to_yaml output should load back to the same values."""
        config = PipelineConfig.from_dict({"inquiry": {"quote_price": "99.5"}})
        path = tmp_path / "config" / "pipeline.yaml"

        config.to_yaml(path)
        loaded = PipelineConfig.from_yaml(path)

        assert loaded.inquiry.quote_price == Decimal("99.5")
        assert loaded.execution.spread_threshold == config.execution.spread_threshold

    def test_missing_file(self, tmp_path: Path) -> None:
        """Should raise FileNotFoundError for a missing file."""
        with pytest.raises(FileNotFoundError):
            PipelineConfig.from_yaml(tmp_path / "missing.yaml")

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        """An empty YAML file should give the defaults."""
        path = tmp_path / "empty.yaml"
        path.write_text("")

        assert PipelineConfig.from_yaml(path).market_data.book_depth == 5


class TestLoadConfig:
    """Tests for load_config."""

    def test_explicit_path(self, tmp_path: Path) -> None:
        """Should load the given file."""
        path = tmp_path / "custom.yaml"
        path.write_text("gui:\n  enabled: false\n")

        assert load_config(path).gui.enabled is False

    def test_default_location(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should find ./config/pipeline.yaml."""
        (tmp_path / "config").mkdir()
        (tmp_path / "config" / "pipeline.yaml").write_text("log_level: DEBUG\n")
        monkeypatch.chdir(tmp_path)

        assert load_config().log_level == "DEBUG"

    def test_no_file_gives_defaults(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Should fall back to defaults."""
        monkeypatch.chdir(tmp_path)

        assert load_config().log_level == "INFO"
