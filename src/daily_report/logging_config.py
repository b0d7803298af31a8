"""structlog configuration for the command-line entry point."""

import logging
import sys

import structlog


def configure_logging(level: str = "WARNING") -> None:
    """Send structured logs to stderr, filtered at ``level``.

    Args:
        level: Standard logging level name (DEBUG, INFO, WARNING, ...)

    Raises:
        ValueError: If the level name is unknown
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level}")

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
