"""Logging configuration for the command line."""

from __future__ import annotations

import logging.config
from typing import Any


def setup_logging(verbose: bool = False) -> None:
    """Send ``buildsizes`` log records to stderr.

    Warnings and errors are shown by default; ``verbose`` adds debug traces.
    """
    level = "DEBUG" if verbose else "WARNING"
    log_config: dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "simple": {"format": "%(levelname)s: %(message)s"},
            "detailed": {"format": "%(asctime)s %(levelname)s [%(name)s] %(message)s"},
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": level,
                "formatter": "detailed" if verbose else "simple",
                "stream": "ext://sys.stderr",
            },
        },
        "loggers": {
            "buildsizes": {"handlers": ["console"], "level": level, "propagate": False},
        },
    }
    logging.config.dictConfig(log_config)


__all__ = [
    "setup_logging",
]
