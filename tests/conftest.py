"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Write a sample config YAML and return its path."""
    content = """\
output:
  report_format: json
logging:
  level: INFO
"""
    path = tmp_path / "wcagcontrast.yaml"
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run with an empty cwd and home so no real config file is picked up."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    return tmp_path
