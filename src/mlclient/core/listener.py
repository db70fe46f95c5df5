"""Callback listeners for callers that prefer completion callbacks over awaiting."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Protocol

from .logging import get_logger

logger = get_logger(__name__)


class ActionListener[T](Protocol):
    """Completion callback receiving either a response or a failure."""

    def on_response(self, response: T) -> None:
        """Handle a successful response."""
        ...

    def on_failure(self, exc: Exception) -> None:
        """Handle a failure."""
        ...


class FunctionalActionListener[T]:
    """Listener built from two plain callables."""

    def __init__(self, on_response: Callable[[T], None], on_failure: Callable[[Exception], None]) -> None:
        """Initialize with response and failure callables."""
        self._on_response = on_response
        self._on_failure = on_failure

    def on_response(self, response: T) -> None:
        """Forward the response to the response callable."""
        self._on_response(response)

    def on_failure(self, exc: Exception) -> None:
        """Forward the failure to the failure callable."""
        self._on_failure(exc)


def wrap[T](on_response: Callable[[T], None], on_failure: Callable[[Exception], None]) -> ActionListener[T]:
    """Build a listener from two callables.

    Usage:
        listener = wrap(lambda output: print(output), lambda exc: print("failed", exc))
        await notify(client.predict(model_id, ml_input), listener)
    """
    return FunctionalActionListener(on_response, on_failure)


class NotifyOnceListener[T]:
    """Listener guard that forwards at most one notification to its delegate."""

    def __init__(self, delegate: ActionListener[T]) -> None:
        """Initialize with the listener to protect."""
        self._delegate = delegate
        self._notified = False

    @property
    def notified(self) -> bool:
        """Whether a notification has already been delivered."""
        return self._notified

    def on_response(self, response: T) -> None:
        """Deliver the response if nothing was delivered yet."""
        if self._notified:
            return
        self._notified = True
        self._delegate.on_response(response)

    def on_failure(self, exc: Exception) -> None:
        """Deliver the failure if nothing was delivered yet."""
        if self._notified:
            return
        self._notified = True
        self._delegate.on_failure(exc)


async def notify[T](awaitable: Awaitable[T], listener: ActionListener[T]) -> None:
    """Await a facade call and report its outcome to a listener exactly once.

    Exactly one of on_response/on_failure is invoked. An exception raised by the
    listener's own on_response propagates to the caller of notify and is never
    reported back to the same listener as a failure.
    """
    once = NotifyOnceListener(listener)
    try:
        result = await awaitable
    except Exception as exc:
        logger.debug("listener.failure", error_type=type(exc).__name__)
        once.on_failure(exc)
        return

    once.on_response(result)
