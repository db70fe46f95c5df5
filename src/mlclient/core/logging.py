"""Structured logging configuration with request context support."""

from __future__ import annotations

import logging
import os
import sys
from typing import Any

import structlog
from structlog.typing import Processor


def configure_logging(*, level: str | None = None, log_format: str | None = None) -> None:
    """Configure structlog and stdlib logging for console or JSON output.

    Args:
        level: Log level name, defaults to the LOG_LEVEL environment variable or INFO
        log_format: "console" or "json", defaults to the LOG_FORMAT environment variable or console
    """
    level_name = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    output_format = (log_format or os.getenv("LOG_FORMAT", "console")).lower()
    log_level = getattr(logging, level_name, logging.INFO)

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
    ]

    renderer: Processor
    if output_format == "json":
        shared_processors.append(structlog.processors.format_exc_info)
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[*shared_processors, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level)

    # Uvicorn installs its own handlers, route them through ours instead
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers.clear()
        uvicorn_logger.propagate = True


def get_logger(name: str | None = None) -> Any:
    """Get a structlog logger bound to the given name."""
    return structlog.get_logger(name)


def add_request_context(**context: Any) -> None:
    """Bind key/value pairs to the current request's logging context."""
    structlog.contextvars.bind_contextvars(**context)


def clear_request_context(*keys: str) -> None:
    """Remove the given keys from the current request's logging context."""
    structlog.contextvars.unbind_contextvars(*keys)


def reset_request_context() -> None:
    """Drop all values from the current request's logging context."""
    structlog.contextvars.clear_contextvars()
