"""Exception types raised by the client facade and dispatch core."""

from __future__ import annotations


class MLClientError(Exception):
    """Base class for errors raised by mlclient itself."""


class InvalidArgumentError(MLClientError, ValueError):
    """A required argument is missing, empty or unsupported.

    Raised before any remote action is dispatched.
    """


class ActionNotFoundError(MLClientError, KeyError):
    """No handler is registered for the requested action."""

    def __init__(self, action_name: str) -> None:
        """Initialize with the name of the unknown action."""
        super().__init__(f"Action '{action_name}' not found in registry")
        self.action_name = action_name

    def __str__(self) -> str:
        # KeyError quotes its argument otherwise
        return str(self.args[0])


class ActionAlreadyRegisteredError(MLClientError, ValueError):
    """A handler is already registered for the action."""

    def __init__(self, action_name: str) -> None:
        """Initialize with the name of the duplicate action."""
        super().__init__(f"Action '{action_name}' already registered")
        self.action_name = action_name
