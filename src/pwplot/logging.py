from __future__ import annotations

import logging
import logging.config
from logging import LogRecord
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.logging import RichHandler


class ModuleStemFilter(logging.Filter):
    """
    Attach the stem of the emitting source file to each record.
    """

    def filter(self, record: LogRecord) -> bool:
        record.filenameStem = Path(record.filename).stem
        return True


def rich_handler_factory() -> RichHandler:
    return RichHandler(
        console=Console(width=120, stderr=True),
        rich_tracebacks=True,
        tracebacks_suppress=[],
        markup=True,
    )


LOGGING_CONFIG: dict[str, Any] = {
    "version": 1,
    "disable_existing_loggers": False,
    "filters": {
        "stemfilter": {
            "()": ModuleStemFilter,
        }
    },
    "formatters": {
        "pretty": {"format": "[[cyan]%(filenameStem)s[/]] %(message)s"},
    },
    "handlers": {
        "rich": {
            "()": rich_handler_factory,
            "formatter": "pretty",
            "filters": ["stemfilter"],
        },
    },
    "loggers": {
        "pwplot": {
            "handlers": ["rich"],
            "level": "WARNING",
            "propagate": False,
        },
    },
}


def setup(level: int | str | None = None) -> None:
    """
    Initialize logging based on the configuration dictionary in this file.

    Args:
        level: Optional level for the ``pwplot`` logger, e.g. ``"DEBUG"`` to
            trace breakpoint emission and dense product sampling.
    """
    logging.config.dictConfig(LOGGING_CONFIG)
    if level is not None:
        logging.getLogger("pwplot").setLevel(level)


__all__ = ("setup",)
