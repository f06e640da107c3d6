"""Logging setup for the modelgen command."""

from __future__ import annotations

import logging

from .errors import ConfigError

LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


def configure_logging(level: str) -> None:
    """Configure root logging. Raises ConfigError for an unknown level name."""
    if level.lower() not in LOG_LEVELS:
        raise ConfigError(
            f"Invalid log level {level!r}, expected one of: {', '.join(LOG_LEVELS)}"
        )
    logging.basicConfig(
        level=logging.getLevelName(level.upper()),
        format="%(asctime)s %(levelname)s %(message)s",
    )
