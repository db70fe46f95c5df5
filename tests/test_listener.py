"""Tests for callback listeners and notify."""

from __future__ import annotations

from unittest.mock import Mock

import pytest

from mlclient.core import NotifyOnceListener, notify, wrap


async def _succeed() -> str:
    return "done"


async def _fail() -> str:
    raise RuntimeError("boom")


async def test_notify_success() -> None:
    """Test success is delivered to on_response only."""
    listener = Mock()

    await notify(_succeed(), listener)

    listener.on_response.assert_called_once_with("done")
    listener.on_failure.assert_not_called()


async def test_notify_failure() -> None:
    """Test failure is delivered to on_failure only."""
    listener = Mock()

    await notify(_fail(), listener)

    listener.on_response.assert_not_called()
    listener.on_failure.assert_called_once()
    exc = listener.on_failure.call_args.args[0]
    assert isinstance(exc, RuntimeError)
    assert str(exc) == "boom"


async def test_notify_listener_error_is_not_reported_as_failure() -> None:
    """Test an exception from on_response propagates and on_failure is never called."""
    listener = Mock()
    listener.on_response.side_effect = ValueError("listener bug")

    with pytest.raises(ValueError, match="listener bug"):
        await notify(_succeed(), listener)

    listener.on_response.assert_called_once_with("done")
    listener.on_failure.assert_not_called()


async def test_wrap() -> None:
    """Test wrap builds a listener from two callables."""
    responses: list[str] = []
    failures: list[Exception] = []
    listener = wrap(responses.append, failures.append)

    await notify(_succeed(), listener)
    await notify(_fail(), listener)

    assert responses == ["done"]
    assert len(failures) == 1


def test_notify_once_listener() -> None:
    """Test only the first notification reaches the delegate."""
    delegate = Mock()
    once = NotifyOnceListener(delegate)

    assert once.notified is False
    once.on_response("first")
    once.on_failure(RuntimeError("late"))
    once.on_response("second")

    assert once.notified is True
    delegate.on_response.assert_called_once_with("first")
    delegate.on_failure.assert_not_called()
