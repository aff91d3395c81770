"""
Logging for list-filter.

Library modules log structured debug events (``filter_registered``,
``conditions_built``, ``list_queried``) through `get_logger`. Nothing is
rendered until the host application calls `setup_logging`, usually once at
startup, which applies the ``[logging]`` section of the loaded settings.

Example:
    >>> from list_filter.utils import setup_logging
    >>>
    >>> setup_logging()  # uses get_settings().logging
    >>> setup_logging(LoggingSettings(level="DEBUG", format="json"))
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from list_filter.config.settings import LoggingSettings

RENDERERS = ("console", "json")


def _renderer(format: str) -> Any:
    if format == "json":
        return structlog.processors.JSONRenderer()
    if format == "console":
        return structlog.dev.ConsoleRenderer(
            colors=sys.stdout.isatty(),
            exception_formatter=structlog.dev.plain_traceback,
        )
    raise ValueError(f"Unknown log format {format!r}, expected one of {RENDERERS}")


def _processors(settings: LoggingSettings) -> list[Any]:
    """Build the processor chain for the configured fields and renderer."""
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
    ]

    if settings.include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if settings.include_location:
        processors.append(
            structlog.processors.CallsiteParameterAdder(
                [
                    structlog.processors.CallsiteParameter.FILENAME,
                    structlog.processors.CallsiteParameter.LINENO,
                ]
            )
        )

    processors.append(_renderer(settings.format))
    return processors


def setup_logging(settings: LoggingSettings | None = None) -> None:
    """Configure structlog output for list-filter events.

    Args:
        settings: Logging section to apply. Defaults to the ``logging``
            section of `get_settings()`.

    Raises:
        ValueError: If the level or format is not recognized
    """
    if settings is None:
        from list_filter.config.settings import get_settings

        settings = get_settings().logging

    level = logging.getLevelName(settings.level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level {settings.level!r}")

    processors = _processors(settings)

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a logger instance.

    Args:
        name: Logger name (usually __name__)
    """
    logger: structlog.stdlib.BoundLogger = structlog.get_logger(name)
    return logger
