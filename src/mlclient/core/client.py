"""Dispatch primitive: the Client protocol and an in-process, registry-backed node client."""

from __future__ import annotations

import asyncio
import inspect
from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

from .action import ActionRequest, ActionResponse, ActionType
from .context import ThreadContext
from .exceptions import ActionAlreadyRegisteredError, ActionNotFoundError
from .logging import get_logger

logger = get_logger(__name__)

type ActionHandler = Callable[[ActionRequest], Any]


@runtime_checkable
class Client(Protocol):
    """Sends a request to a named remote action and returns the raw response."""

    thread_context: ThreadContext

    async def execute[ResponseT: ActionResponse](self, action: ActionType[ResponseT], request: ActionRequest) -> Any:
        """Execute the action; raises whatever the remote execution raised."""
        ...


class ActionRegistry:
    """Registry mapping action names to handler callables."""

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._handlers: dict[str, ActionHandler] = {}

    def register(self, action: ActionType[Any] | str) -> Callable[[ActionHandler], ActionHandler]:
        """Decorator registering a handler for an action.

        Handlers receive the request object and may be sync or async. Sync handlers
        run in a worker thread.

        Usage:
            registry = ActionRegistry()

            @registry.register(ML_MODEL_GET_ACTION)
            async def get_model(request: MLModelGetRequest) -> MLModelGetResponse:
                return MLModelGetResponse(ml_model=await store.load(request.model_id))
        """

        def decorator(func: ActionHandler) -> ActionHandler:
            self.register_handler(action, func)
            return func

        return decorator

    def register_handler(self, action: ActionType[Any] | str, handler: ActionHandler) -> None:
        """Imperatively register a handler for an action."""
        name = action.name if isinstance(action, ActionType) else action
        if name in self._handlers:
            raise ActionAlreadyRegisteredError(name)
        self._handlers[name] = handler

    def get(self, name: str) -> ActionHandler:
        """Retrieve the handler registered for an action name."""
        if name not in self._handlers:
            raise ActionNotFoundError(name)
        return self._handlers[name]

    def list_all(self) -> list[str]:
        """List all registered action names."""
        return sorted(self._handlers.keys())

    def clear(self) -> None:
        """Remove all handlers."""
        self._handlers.clear()


class NodeClient:
    """Client executing actions through handlers registered on this node."""

    def __init__(self, registry: ActionRegistry | None = None, thread_context: ThreadContext | None = None) -> None:
        """Initialize with an action registry and a thread context."""
        self.registry = registry or ActionRegistry()
        self.thread_context = thread_context or ThreadContext()

    async def execute[ResponseT: ActionResponse](self, action: ActionType[ResponseT], request: ActionRequest) -> Any:
        """Run the handler registered for the action and return its raw result."""
        handler = self.registry.get(action.name)
        logger.debug("node_client.execute", action=action.name, request_type=type(request).__name__)

        if inspect.iscoroutinefunction(handler):
            return await handler(request)

        result = await asyncio.to_thread(handler, request)
        if inspect.isawaitable(result):
            return await result
        return result
