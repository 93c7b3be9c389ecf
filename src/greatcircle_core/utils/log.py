"""
Logging configuration.

The library only creates module-level loggers; handlers are installed by the
application, or by calling `configure_logging()` from scripts and examples.
"""
from __future__ import annotations

import logging.config
from typing import Optional

from ..config import get_settings

PACKAGE_LOGGER = "greatcircle_core"


def configure_logging(level: Optional[str] = None) -> None:
    """
    Attach a stream handler to the package logger.

    Args:
        level: Log level name; defaults to the `log_level` setting
    """
    level = (level or get_settings().log_level).upper()
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                    "level": level,
                },
            },
            "loggers": {
                PACKAGE_LOGGER: {
                    "handlers": ["console"],
                    "level": level,
                    "propagate": False,
                },
            },
        }
    )
