"""
Opt-in logging for namedcollections.

The library only emits records on its own ``namedcollections`` logger and
installs no handlers on import. :func:`setup` attaches a rich handler to that
logger alone, so the application's root logger is left untouched.
"""

from __future__ import annotations

import logging
import logging.config
from logging import LogRecord
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "namedcollections"


class AppFilter(logging.Filter):
    """
    Expose the stem of the emitting module as ``filenameStem``.
    """

    def filter(self, record: LogRecord) -> bool:
        record.filenameStem = Path(record.filename).stem
        return True


def rich_handler_factory() -> RichHandler:
    return RichHandler(
        console=Console(width=160, stderr=True),
        rich_tracebacks=True,
        tracebacks_suppress=[],
        markup=True,
    )


def logging_config(level: str = "INFO") -> dict[str, Any]:
    """
    Build a ``dictConfig`` mapping that routes the package logger to rich.

    Records stop at the package logger, so enabling DEBUG here does not flood
    handlers the application attached to the root logger.
    """
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {
            "appfilter": {
                "()": AppFilter,
            }
        },
        "formatters": {
            "pretty": {"format": "[[yellow]%(filenameStem)s[/]] %(message)s"},
        },
        "handlers": {
            "rich": {
                "()": rich_handler_factory,
                "formatter": "pretty",
                "filters": ["appfilter"],
            },
        },
        "loggers": {
            LOGGER_NAME: {
                "handlers": ["rich"],
                "level": level,
                "propagate": False,
            },
        },
    }


def setup(level: str = "INFO") -> None:
    """
    Send ``namedcollections`` records at ``level`` and above to a rich handler.
    """
    logging.config.dictConfig(logging_config(level))


__all__ = ("logging_config", "setup")
