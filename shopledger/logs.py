"""
Structured Logging

Every module logs through structlog with snake_case event names and
keyword context, e.g. logger.error("persist_failed", key="app-sales").

Failures in the ledger are never shown to the user (storage errors,
corrupt saved data). The log is the only place they surface.
"""

import logging
from typing import Optional

import structlog


# Configure structlog for local logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer()
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)


def configure_logging(level: str = "INFO") -> None:
    """
    Route log output to stderr at the given level.

    Level filtering happens in the standard library logger, so this can be
    called after loggers were first used.
    """
    logging.basicConfig(format="%(message)s", level=level)
    logging.getLogger().setLevel(level)


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger bound to a module name."""
    return structlog.get_logger(name)
