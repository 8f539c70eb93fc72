"""Tests for config loading."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from wcagcontrast.config import WcagContrastConfig


class TestWcagContrastConfig:
    def test_defaults(self) -> None:
        cfg = WcagContrastConfig()
        assert cfg.output.report_format == "table"
        assert cfg.logging.level == "WARNING"

    def test_load_from_yaml(self, config_file: Path) -> None:
        cfg = WcagContrastConfig.load(config_file)
        assert cfg.output.report_format == "json"
        assert cfg.logging.level == "INFO"

    def test_load_missing_file_returns_defaults(self, isolated_cwd: Path) -> None:
        cfg = WcagContrastConfig.load(None)
        # Falls through all candidates and returns default
        assert cfg.output.report_format == "table"

    def test_discovers_cwd_config(self, isolated_cwd: Path) -> None:
        (isolated_cwd / "wcagcontrast.yaml").write_text("output:\n  report_format: markdown\n", encoding="utf-8")
        cfg = WcagContrastConfig.load()
        assert cfg.output.report_format == "markdown"

    def test_partial_yaml(self, tmp_path: Path) -> None:
        config_file = tmp_path / "wcagcontrast.yaml"
        config_file.write_text("logging:\n  level: INFO\n", encoding="utf-8")
        cfg = WcagContrastConfig.load(config_file)
        assert cfg.logging.level == "INFO"
        assert cfg.output.report_format == "table"  # default preserved

    def test_empty_yaml(self, tmp_path: Path) -> None:
        config_file = tmp_path / "wcagcontrast.yaml"
        config_file.write_text("", encoding="utf-8")
        assert WcagContrastConfig.load(config_file) == WcagContrastConfig()

    def test_rejects_unknown_format(self, tmp_path: Path) -> None:
        config_file = tmp_path / "wcagcontrast.yaml"
        config_file.write_text("output:\n  report_format: pdf\n", encoding="utf-8")
        with pytest.raises(ValidationError):
            WcagContrastConfig.load(config_file)
