"""Structured logging setup."""

import logging
import sys

import structlog

from pgmoney.core.config import settings


def setup_logging(level: str = None, json_logs: bool = None, cache_logger: bool = True) -> None:
    """
    Configure stdlib logging and structlog.
    
    Args:
        level: Log level name (default: settings.LOG_LEVEL)
        json_logs: Render JSON lines instead of console output (default: settings.LOG_JSON)
        cache_logger: Freeze each logger to this configuration on first use
    """
    level = (level or settings.LOG_LEVEL).upper()
    if json_logs is None:
        json_logs = settings.LOG_JSON
    
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level, force=True)
    
    renderer = structlog.processors.JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer()
    
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=cache_logger,
    )


def get_logger(name: str = None):
    """Get a structlog logger bound to the given name."""
    return structlog.get_logger(name)
