"""
Logging configuration for markov_walk entry points.
"""

from __future__ import annotations

import logging.config
import sys
from typing import Any

from markov_walk.config import settings


def setup_logging(level: str | None = None) -> None:
    log_config: dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "simple": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "simple",
                "stream": sys.stderr,
            },
        },
        "loggers": {
            "markov_walk": {
                "level": level or settings.log_level,
                "handlers": ["console"],
                "propagate": False,
            },
        },
    }
    logging.config.dictConfig(log_config)
