"""Tests for ComponentFuture."""

from __future__ import annotations

import asyncio

import pytest

from fastapi_component_page.exceptions import FuturePendingError, TransportError
from fastapi_component_page.future import (
    ComponentFuture,
    FutureStatus,
    Outcome,
    Resolution,
)


def _future(gate: asyncio.Event, outcome: Outcome[str]) -> ComponentFuture[str]:
    async def body() -> Outcome[str]:
        await gate.wait()
        return outcome

    return ComponentFuture("Comp", asyncio.create_task(body()))


class TestComponentFuture:
    async def test_pending_until_task_finishes(self) -> None:
        gate = asyncio.Event()
        future = _future(gate, Outcome("state", Resolution.DEFAULT, 1.0))
        assert future.status is FutureStatus.PENDING
        assert not future.done()
        gate.set()
        await future
        assert future.status is FutureStatus.RESOLVED
        assert future.done()

    async def test_read_before_resolution_raises(self) -> None:
        gate = asyncio.Event()
        future = _future(gate, Outcome("state", Resolution.DEFAULT, 1.0))
        with pytest.raises(FuturePendingError) as exc_info:
            future.result()
        assert exc_info.value.component_id == "Comp"
        with pytest.raises(FuturePendingError):
            _ = future.resolution
        gate.set()
        await future.wait()

    async def test_await_returns_state(self) -> None:
        gate = asyncio.Event()
        gate.set()
        future = _future(gate, Outcome("state", Resolution.ACTION, 2.5))
        assert await future == "state"
        assert future.result() == "state"
        assert future.resolution is Resolution.ACTION
        assert future.duration_ms == 2.5
        assert future.error is None

    async def test_resolves_once_and_is_stable(self) -> None:
        gate = asyncio.Event()
        gate.set()
        future = _future(gate, Outcome("state", Resolution.DEFAULT, 0.0))
        first = await future
        second = await future.wait()
        assert first == second == future.result()
        assert future.outcome() is future.outcome()

    async def test_exposes_error(self) -> None:
        gate = asyncio.Event()
        gate.set()
        err = TransportError("down")
        future = _future(gate, Outcome("", Resolution.FAILED, 0.0, err))
        await future
        assert future.error is err
        assert future.resolution is Resolution.FAILED

    async def test_repr_shows_status(self) -> None:
        gate = asyncio.Event()
        future = _future(gate, Outcome("s", Resolution.DEFAULT, 0.0))
        assert "pending" in repr(future)
        gate.set()
        await future
        assert "resolved" in repr(future)
        assert future.component_id == "Comp"
