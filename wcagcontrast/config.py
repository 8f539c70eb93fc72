"""Pydantic configuration model with YAML loading."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field

_DEFAULT_CONFIG_NAME = "wcagcontrast.yaml"


class OutputConfig(BaseModel):
    """How the CLI renders a verdict."""

    report_format: Literal["table", "json", "markdown"] = "table"


class LoggingConfig(BaseModel):
    """CLI log level."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"


class WcagContrastConfig(BaseModel):
    """Top-level configuration for the wcagcontrast CLI."""

    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def load(cls, path: Path | None = None) -> WcagContrastConfig:
        """Load config from a YAML file.

        Search order when *path* is None:
          1. ./wcagcontrast.yaml
          2. ~/.config/wcagcontrast/wcagcontrast.yaml

        Returns default config if no file is found.
        """
        if path is not None:
            return cls._from_yaml(path)

        candidates = [
            Path.cwd() / _DEFAULT_CONFIG_NAME,
            Path.home() / ".config" / "wcagcontrast" / _DEFAULT_CONFIG_NAME,
        ]
        for candidate in candidates:
            if candidate.is_file():
                return cls._from_yaml(candidate)

        return cls()

    @classmethod
    def _from_yaml(cls, path: Path) -> WcagContrastConfig:
        raw: dict[str, Any] = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        return cls.model_validate(raw)
