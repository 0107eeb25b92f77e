"""Logging configuration for the application."""

import logging.config
from typing import Any, Dict

from pdftools.core.config import settings

LOGGING_CONFIG: Dict[str, Any] = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {
            "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "default",
            "stream": "ext://sys.stdout",
        },
    },
    "loggers": {
        "pdftools": {"level": settings.LOG_LEVEL, "propagate": True},
        # pypdf is chatty about recoverable structure problems
        "pypdf": {"level": "ERROR", "propagate": True},
    },
    "root": {
        "level": "INFO",
        "handlers": ["console"],
    },
}


def setup_logging() -> None:
    """Apply LOGGING_CONFIG to the logging module."""
    logging.config.dictConfig(LOGGING_CONFIG)
