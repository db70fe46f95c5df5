"""Request-scoped transient context shared between the REST layer and the client."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any

# Transient key holding the already-resolved security user string ("name|backend_roles|roles|tenant")
USER_INFO_TRANSIENT = "_opendistro_security_user_info"


class ThreadContext:
    """Transient key/value storage scoped to the current asyncio task or thread.

    Values live in a ContextVar, so each request handled on its own task sees only
    its own transients. Each ThreadContext instance owns a separate variable.
    """

    def __init__(self, name: str = "mlclient_thread_context") -> None:
        """Initialize with an empty transient map."""
        self._transients: ContextVar[dict[str, Any] | None] = ContextVar(name, default=None)

    def put_transient(self, key: str, value: Any) -> None:
        """Store a transient value; existing keys cannot be overwritten."""
        current = self._transients.get() or {}
        if key in current:
            raise ValueError(f"Transient value for key '{key}' is already set")
        self._transients.set({**current, key: value})

    def get_transient(self, key: str) -> Any:
        """Return a transient value or None."""
        current = self._transients.get()
        if current is None:
            return None
        return current.get(key)

    def transients(self) -> dict[str, Any]:
        """Return a copy of all transient values."""
        return dict(self._transients.get() or {})

    @contextmanager
    def stash_context(self) -> Iterator[None]:
        """Run a block with empty transients and restore the previous ones afterwards."""
        token = self._transients.set(None)
        try:
            yield
        finally:
            self._transients.reset(token)
