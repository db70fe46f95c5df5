"""Tests for logging configuration, request context and the app runner."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any

import pytest
import structlog
from fastapi import FastAPI

from mlclient.core.api import utilities
from mlclient.core.api.utilities import run_app
from mlclient.core.logging import (
    add_request_context,
    clear_request_context,
    configure_logging,
    reset_request_context,
)


@pytest.fixture
def restore_root_logger() -> Iterator[None]:
    """Restore root logger handlers and level after reconfiguration."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()


def test_request_context() -> None:
    """Test binding, clearing and resetting the request context."""
    reset_request_context()
    add_request_context(request_id="abc", path="/x")
    assert structlog.contextvars.get_contextvars() == {"request_id": "abc", "path": "/x"}

    clear_request_context("path")
    assert structlog.contextvars.get_contextvars() == {"request_id": "abc"}

    reset_request_context()
    assert structlog.contextvars.get_contextvars() == {}


@pytest.mark.usefixtures("restore_root_logger")
def test_configure_logging_level_and_handler() -> None:
    """Test the root logger gets a single structlog-formatted handler."""
    configure_logging(level="debug", log_format="json")

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)
    assert logging.getLogger("uvicorn.access").propagate is True


@pytest.mark.usefixtures("restore_root_logger")
def test_configure_logging_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test the level falls back to the LOG_LEVEL environment variable."""
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    configure_logging()
    assert logging.getLogger().level == logging.WARNING


def test_run_app_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test run_app passes environment defaults to uvicorn."""
    calls: list[tuple[Any, dict[str, Any]]] = []
    monkeypatch.setattr(utilities.uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)))
    monkeypatch.setenv("PORT", "9001")
    monkeypatch.delenv("HOST", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    app = FastAPI()
    run_app(app)

    assert calls[0][0] is app
    kwargs = calls[0][1]
    assert kwargs["host"] == "127.0.0.1"
    assert kwargs["port"] == 9001
    assert kwargs["log_level"] == "info"
    assert kwargs["log_config"] is None


def test_run_app_reload_requires_import_string() -> None:
    """Test reload is rejected for app instances."""
    with pytest.raises(ValueError, match="import string"):
        run_app(FastAPI(), reload=True)
