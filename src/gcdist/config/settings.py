# src/gcdist/config/settings.py
"""
Package settings (Pydantic).

Settings are loaded from `src/gcdist/config/defaults.yaml`, then optionally overridden by:
- an external YAML file via `GCDIST_CONFIG_PATH`
- environment variables (`GCDIST_LOG_LEVEL`, `GCDIST_TRACE`)

Nothing here changes the distance math; settings only control diagnostics.
"""

from __future__ import annotations

import os
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

from gcdist.core.env import load_dotenv_if_present

_TRUTHY = {"1", "true", "yes", "on"}


def _read_package_yaml(filename: str) -> dict[str, Any]:
    """Read a YAML file packaged inside `gcdist.config`."""
    text = resources.files("gcdist.config").joinpath(filename).read_text(encoding="utf-8")
    data = yaml.safe_load(text) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML root object for {filename}; expected a mapping.")
    return data


def _read_yaml_file(path: str | Path) -> dict[str, Any]:
    """Read a YAML file from disk and return its mapping root."""
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML root object for {path}; expected a mapping.")
    return data


class AppSettings(BaseModel):
    name: str = "gcdist"
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"}:
            raise ValueError(f"Unknown log level '{value}'.")
        return level


class GeoSettings(BaseModel):
    # When enabled, `configure_logging` exposes the calculator's DEBUG diagnostics.
    trace: bool = False


class Settings(BaseModel):
    app: AppSettings = Field(default_factory=AppSettings)
    geo: GeoSettings = Field(default_factory=GeoSettings)


def _apply_env_overrides(data: dict[str, Any]) -> dict[str, Any]:
    """Overlay selected environment variables onto raw settings payload."""
    load_dotenv_if_present()
    data = dict(data)

    log_level = os.getenv("GCDIST_LOG_LEVEL")
    if log_level:
        data["app"] = {**(data.get("app") or {}), "log_level": log_level}

    trace = os.getenv("GCDIST_TRACE")
    if trace:
        data["geo"] = {**(data.get("geo") or {}), "trace": trace.strip().lower() in _TRUTHY}

    return data


@lru_cache
def get_settings() -> Settings:
    """Load and validate settings (cached)."""
    load_dotenv_if_present()
    config_path = os.getenv("GCDIST_CONFIG_PATH")
    raw = _read_yaml_file(config_path) if config_path else _read_package_yaml("defaults.yaml")
    raw = _apply_env_overrides(raw)
    return Settings.model_validate(raw)


@lru_cache
def get_logging_config() -> dict[str, Any]:
    """Load logging configuration (cached)."""
    return _read_package_yaml("logging.yaml")
