"""Tests for the command line entry point."""

from pathlib import Path

import pytest

from bond_pipeline.main import build_config, main, parse_args
from bond_pipeline.reference.bonds import US2Y


class TestBuildConfig:
    """Tests for build_config."""

    def test_overrides(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Command line options should override the config."""
        monkeypatch.chdir(tmp_path)
        args = parse_args(
            [
                "--data-dir",
                "in",
                "--output-dir",
                "out",
                "--no-history",
                "--log-level",
                "DEBUG",
                "--metrics-file",
                "metrics.prom",
            ]
        )

        config = build_config(args)

        assert config.inputs.data_dir == "in"
        assert config.history.output_dir == "out"
        assert config.history.enabled is False
        assert config.log_level == "DEBUG"
        assert config.metrics_file == "metrics.prom"


class TestMain:
    """Tests for main."""

    def test_missing_config_returns_1(self, tmp_path: Path) -> None:
        """A missing config file should exit with 1."""
        assert main(["--config", str(tmp_path / "missing.yaml")]) == 1

    def test_dry_run(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """A dry run should assemble and exit with 0."""
        monkeypatch.chdir(tmp_path)

        assert main(["--dry-run", "--no-history"]) == 0

    def test_full_run(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """A run should replay inputs, write history and metrics."""
        monkeypatch.chdir(tmp_path)
        data = tmp_path / "data"
        data.mkdir()
        (data / "trades.txt").write_text(f"{US2Y},T1,99-16,TRSY1,100,BUY\n")

        exit_code = main(
            ["-d", str(data), "-o", str(tmp_path / "out"), "--metrics-file", "m.prom"]
        )

        assert exit_code == 0
        assert (tmp_path / "out" / "positions.jsonl").exists()
        assert "bond_pipeline_records_replayed_total" in (tmp_path / "m.prom").read_text()
