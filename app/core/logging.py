"""Structured logging setup.

Loggers emit dotted event names with keyword context:

    logger = get_logger(__name__)
    logger.info("notes.add_completed", note_id=note.id)
"""

import logging
import sys

import structlog


def setup_logging(
    log_level: str = "INFO", json_logs: bool = False, cache_loggers: bool = True
) -> None:
    """Configure structlog and the standard library root logger.

    Args:
        log_level: Minimum level name to emit.
        json_logs: If True, render JSON lines; otherwise human-readable console output.
        cache_loggers: Freeze each logger's configuration on first use.
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level, force=True)

    renderers: list[structlog.types.Processor] = (
        [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
        if json_logs
        else [structlog.dev.ConsoleRenderer()]
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            *renderers,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=cache_loggers,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a structured logger bound to a module name."""
    return structlog.get_logger(name)
