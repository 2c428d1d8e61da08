"""Tests for pipeline metrics."""

import tempfile
from pathlib import Path

from bond_pipeline.monitoring.metrics import PipelineMetrics


class TestPipelineMetrics:
    """Tests for PipelineMetrics."""

    def test_counts_replayed_and_failed(self) -> None:
        """Should count per source and error."""
        metrics = PipelineMetrics()
        metrics.record_replayed("prices")
        metrics.record_replayed("prices")
        metrics.record_failed("trades", "RecordParseError")

        assert metrics.value("records_replayed", source="prices") == 2
        assert metrics.value("records_failed", source="trades", error="RecordParseError") == 1
        assert metrics.value("records_replayed", source="trades") == 0

    def test_stage_listener(self) -> None:
        """Stage listeners should count every message."""
        metrics = PipelineMetrics()
        listener = metrics.stage_listener("risk")

        listener(object())
        listener(object())

        assert metrics.value("stage_messages", stage="risk") == 2

    def test_registries_are_independent(self) -> None:
        """Two collectors should not share counts."""
        first = PipelineMetrics()
        second = PipelineMetrics()
        first.record_replayed("prices")

        assert second.value("records_replayed", source="prices") == 0

    def test_render_and_write(self) -> None:
        """Should render the text exposition and write it to a file."""
        metrics = PipelineMetrics()
        metrics.record_replayed("prices")

        text = metrics.render()
        assert 'bond_pipeline_records_replayed_total{source="prices"} 1.0' in text

        with tempfile.TemporaryDirectory() as d:
            path = Path(d) / "out" / "metrics.prom"
            metrics.write(path)
            assert path.read_text() == text
