"""Settings for the datecomp CLI and API.

Settings are read from an optional YAML file and then overridden by the
environment.

Environment variables (optional)
--------------------------------
DATECOMP_CONFIG
    Path to a YAML settings file. Ignored when a path is passed explicitly.
DATECOMP_LOG_LEVEL
    Logging level name, e.g. ``INFO`` (default ``WARNING``).
DATECOMP_DEBUG ("1" to enable)
    Forces DEBUG logging, which includes the reason each rejected string failed.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import BaseModel, field_validator


class Settings(BaseModel):
    log_level: str = "WARNING"
    debug: bool = False
    cors_origins: list[str] = ["*"]

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value}")
        return level

    def effective_level(self) -> int:
        return logging.DEBUG if self.debug else logging.getLevelName(self.log_level)


def load_settings_file(path: Union[str, Path]) -> dict[str, Any]:
    path = Path(path)
    with path.open(encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping at the top level")
    return data


def load_settings(path: Optional[Union[str, Path]] = None) -> Settings:
    path = path or os.getenv("DATECOMP_CONFIG")
    data = load_settings_file(path) if path else {}

    level = os.getenv("DATECOMP_LOG_LEVEL")
    if level:
        data["log_level"] = level
    if os.getenv("DATECOMP_DEBUG", "0") == "1":
        data["debug"] = True
    return Settings(**data)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.effective_level(),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
