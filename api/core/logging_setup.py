"""
Process-wide logging configuration.

One stdout handler on the root logger; uvicorn's loggers are routed through
the same handler so access and application logs share a format.
"""

from __future__ import annotations

import logging
from logging.config import dictConfig

from . import config


def _dict_config(level: str) -> dict:
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(asctime)s %(levelname)s:%(name)s:%(message)s",
            }
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": level,
                "formatter": "default",
                "stream": "ext://sys.stdout",
            }
        },
        "root": {"level": level, "handlers": ["console"]},
        "loggers": {
            "uvicorn": {"level": level, "handlers": ["console"], "propagate": False},
            "uvicorn.error": {"level": level, "handlers": ["console"], "propagate": False},
            "uvicorn.access": {"level": level, "handlers": ["console"], "propagate": False},
        },
    }


def configure_logging() -> None:
    """
    Configure logging once.

    Returns early when the root logger already has handlers (reloaders,
    pytest's capture handler).
    """
    root = logging.getLogger()
    if root.handlers:
        return
    dictConfig(_dict_config(config.log_level()))
