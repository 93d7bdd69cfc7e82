from __future__ import annotations

import logging
import logging.config
import sys
from collections import OrderedDict
from enum import Enum
from typing import Any

import structlog

from google_contacts.api.settings import settings


class LogRenderer(str, Enum):
    CONSOLE = "CONSOLE"
    JSON = "JSON"

    @staticmethod
    def default() -> LogRenderer:
        """Returns the default LogRenderer based on whether the stdout is a tty terminal."""
        return LogRenderer.CONSOLE if sys.stdout.isatty() else LogRenderer.JSON


def configure(
    level: int | str | None = None,
    renderer: LogRenderer | None = None,
    handlers: dict[str, dict[str, Any]] | None = None,
) -> None:
    """
    Configures structlog and routes the standard library loggers through it.

    Args:
        level (int | str | None): The lowest level to display (defaults to settings.log_level).
        renderer (LogRenderer | None): The renderer (defaults to LogRenderer.default()).
        handlers (dict[str, dict[str, Any]] | None): The standard lib logging handlers.
    """
    structlog.reset_defaults()
    if level is None:
        level = settings.log_level
    level_no = level if isinstance(level, int) else logging.getLevelNamesMapping()[level.upper()]
    level_name = logging.getLevelName(level_no)

    processor: structlog.dev.ConsoleRenderer | structlog.processors.JSONRenderer
    if (renderer or LogRenderer.default()) == LogRenderer.CONSOLE:
        processor = structlog.dev.ConsoleRenderer()
    else:
        processor = structlog.processors.JSONRenderer()

    timestamper = structlog.processors.TimeStamper(fmt="iso", utc=True)
    shared: list[structlog.typing.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        timestamper,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if handlers is None:
        handlers = {
            "default": {
                "level": level_name,
                "class": "logging.StreamHandler",
                "stream": sys.stderr,
                "formatter": "structlog",
            },
        }

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "structlog": {
                    "()": structlog.stdlib.ProcessorFormatter,
                    "processor": processor,
                    "foreign_pre_chain": shared,
                },
            },
            "handlers": handlers,
            "loggers": {
                "": {"handlers": list(handlers), "level": level_name, "propagate": True},
                # urllib3 logs every connection at debug level
                "urllib3": {"level": max(level_no, logging.INFO)},
            },
        }
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.contextvars.merge_contextvars,
            *shared,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level_no),
        context_class=OrderedDict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
