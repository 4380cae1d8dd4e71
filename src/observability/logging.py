"""
Structured logging for diario-mood using structlog.

Production renders JSON lines, development renders colored console
output. Log lines go to stderr so CLI output on stdout stays parseable.
Per-invocation fields (command, sensitivity, entry counts) are bound
through contextvars and attached to every log line of that invocation.
"""

import logging
import sys

import structlog
from structlog.types import Processor

from src.config.settings import get_settings


def _renderer(json_output: bool) -> Processor:
    if json_output:
        # Mood emojis stay readable in JSON logs
        return structlog.processors.JSONRenderer(ensure_ascii=False)
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def setup_logging(level: str | None = None) -> None:
    """
    Configure structlog over the standard library logging module.

    Args:
        level: Log level override (e.g. "DEBUG" from the CLI --debug flag).
            Defaults to the LOG_LEVEL setting.

    Usage:
        setup_logging()
        logger = get_logger(__name__)
        logger.info("Mood analyzed", mood="😊", confidence=0.72)
    """
    settings = get_settings()
    log_level = level or settings.log_level

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if settings.is_production:
        processors.append(structlog.processors.format_exc_info)
    processors.append(_renderer(json_output=settings.is_production))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(format="%(message)s", stream=sys.stderr)
    logging.getLogger().setLevel(getattr(logging, log_level))


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger (module name by convention)."""
    return structlog.get_logger(name)


def bind_context(**kwargs) -> None:
    """
    Bind fields to every subsequent log line in the current context.

    The CLI binds the command name and sensitivity so engine logs can be
    traced back to the invocation that produced them.
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Drop all bound fields."""
    structlog.contextvars.clear_contextvars()
