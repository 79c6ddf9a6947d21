"""Structured logging setup."""

import logging
import sys

import structlog

from nullsafe.config.settings import Settings
from nullsafe.exceptions import ConfigurationError


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger backed by the stdlib logger ``name``.

    Events go through stdlib ``logging``, so nothing is emitted below the
    level the application has configured.
    """
    return structlog.wrap_logger(
        logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger
    )


def setup_logging(level: str | None = None, log_format: str | None = None) -> None:
    """Configure structlog and the stdlib root logger.

    Args:
        level: Logging level name, defaults to ``Settings().logging.level``
        log_format: "json" or "text", defaults to ``Settings().logging.format``

    Raises:
        ConfigurationError: If the level or format is unknown
    """
    if level is None or log_format is None:
        configured = Settings().logging
        level = level or configured.level
        log_format = log_format or configured.format
    level = level.upper()

    numeric_level = logging.getLevelName(level)
    if not isinstance(numeric_level, int):
        raise ConfigurationError(f"Unknown log level: {level}")

    if log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    elif log_format == "text":
        renderer = structlog.dev.ConsoleRenderer(colors=False)
    else:
        raise ConfigurationError(f"Unknown log format: {log_format}")

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(numeric_level)
