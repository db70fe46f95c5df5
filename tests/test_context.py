"""Tests for ThreadContext."""

from __future__ import annotations

import asyncio

import pytest

from mlclient.core import ThreadContext


def test_put_and_get_transient() -> None:
    """Test transient values round-trip."""
    context = ThreadContext("test_put_and_get")
    context.put_transient("user", "alice||admin")

    assert context.get_transient("user") == "alice||admin"
    assert context.get_transient("missing") is None
    assert context.transients() == {"user": "alice||admin"}


def test_put_transient_twice_raises() -> None:
    """Test an existing transient cannot be overwritten."""
    context = ThreadContext("test_put_twice")
    context.put_transient("user", "alice")

    with pytest.raises(ValueError, match="already set"):
        context.put_transient("user", "bob")


def test_stash_context() -> None:
    """Test stash_context hides and restores transients."""
    context = ThreadContext("test_stash")
    context.put_transient("user", "alice")

    with context.stash_context():
        assert context.get_transient("user") is None
        context.put_transient("user", "bob")
        assert context.get_transient("user") == "bob"

    assert context.get_transient("user") == "alice"


async def test_transients_are_task_scoped() -> None:
    """Test concurrent tasks do not see each other's transients."""
    context = ThreadContext("test_task_scoped")

    async def handle(user: str) -> str | None:
        context.put_transient("user", user)
        await asyncio.sleep(0)
        return context.get_transient("user")

    results = await asyncio.gather(handle("alice"), handle("bob"))

    assert results == ["alice", "bob"]
    assert context.get_transient("user") is None
