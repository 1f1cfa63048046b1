"""
Logging setup.

Configures structlog to emit JSON (production) or colored console lines
(development) on stderr, keeping stdout free for command output.
"""

from __future__ import annotations
import logging
import sys

import structlog


def _parse_level(value: str | None) -> int:
    """Map 'debug', 'INFO', ... to a logging constant, defaulting to INFO."""
    if not value:
        return logging.INFO
    level = getattr(logging, value.strip().upper(), None)
    return level if isinstance(level, int) else logging.INFO


def configure_logging(level: str | None = "INFO", fmt: str = "console"):
    """
    Configure structlog for the process.

    Args:
        level: Minimum level name (e.g. "DEBUG", "warning")
        fmt: "json" for machine-readable output, anything else for console
    """
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if fmt == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(_parse_level(level)),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
