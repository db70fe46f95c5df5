"""Action identifiers and base request/response schemas for remote dispatch."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Self

from pydantic import BaseModel, ConfigDict


class ActionRequest(BaseModel):
    """Base class for requests sent to a remote action."""

    model_config = ConfigDict(populate_by_name=True)


class ActionResponse(BaseModel):
    """Base class for responses returned by a remote action."""

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_action_response(cls, response: Any) -> Self:
        """Re-create a typed response from whatever the dispatch primitive returned.

        Accepts an instance of this class, any other pydantic model carrying the same
        fields, or a plain mapping.
        """
        if isinstance(response, cls):
            return response
        if isinstance(response, BaseModel):
            return cls.model_validate(response.model_dump(by_alias=True))
        if isinstance(response, Mapping):
            return cls.model_validate(dict(response))
        raise TypeError(f"Cannot convert {type(response).__name__} to {cls.__name__}")


class ActionType[ResponseT: ActionResponse]:
    """Named remote action together with the response type it produces."""

    __slots__ = ("name", "response_type")

    def __init__(self, name: str, response_type: type[ResponseT]) -> None:
        """Initialize with the action name and its response schema."""
        self.name = name
        self.response_type = response_type

    def decode(self, raw: Any) -> ResponseT:
        """Convert a raw dispatch result to this action's response type."""
        return self.response_type.from_action_response(raw)

    def __repr__(self) -> str:
        return f"ActionType({self.name!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ActionType):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)
