"""
Logging configuration.

We use a YAML logging config (`src/gcdist/config/logging.yaml`) and then apply
runtime overrides from settings (e.g., `GCDIST_LOG_LEVEL`, `GCDIST_TRACE`).

The library itself never calls this; applications opt in.
"""

from __future__ import annotations

import copy
import logging.config

from gcdist.config.settings import get_logging_config, get_settings

GEO_LOGGER = "gcdist.core.geo"


def configure_logging() -> None:
    """Configure the Python logging system based on packaged YAML config + settings."""
    settings = get_settings()
    # The cached dict is shared; never mutate it in place.
    config = copy.deepcopy(get_logging_config())

    level = settings.app.log_level.upper()
    config.setdefault("root", {})["level"] = level
    loggers = config.setdefault("loggers", {})
    loggers.setdefault("gcdist", {})["level"] = level

    handler_level = level
    if settings.geo.trace:
        loggers[GEO_LOGGER] = {"level": "DEBUG", "propagate": True}
        handler_level = "DEBUG"

    for handler in config.get("handlers", {}).values():
        if isinstance(handler, dict) and "level" in handler:
            handler["level"] = handler_level

    logging.config.dictConfig(config)
