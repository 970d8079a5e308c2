"""structlog setup for the k8r command line.

The report owns stdout, so every log line goes to stderr. Operators get a
coloured console renderer by default; ``json`` is for piping into collectors.
"""

from __future__ import annotations

import logging
import sys

import structlog

LOG_FORMATS = ("console", "json")


def _renderer(fmt: str) -> structlog.types.Processor:
    if fmt == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def setup_logging(level: str = "warning", fmt: str = "console") -> None:
    """Configure structlog at ``level`` with the ``fmt`` renderer."""
    log_level = getattr(logging, level.upper(), logging.WARNING)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso", utc=True, key="ts"),
            _renderer(fmt),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(component: str) -> structlog.stdlib.BoundLogger:
    """Return a logger bound with ``component``."""
    return structlog.get_logger(component=component)  # type: ignore[return-value]
