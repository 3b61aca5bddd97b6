"""ComponentFuture — a handle to a component state that resolves once."""

from __future__ import annotations

import asyncio
from collections.abc import Generator
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic

from fastapi_component_page._types import S
from fastapi_component_page.exceptions import FuturePendingError, PageException


class FutureStatus(Enum):
    PENDING = "pending"
    RESOLVED = "resolved"


class Resolution(Enum):
    """Which path produced a resolved component state."""

    ACTION = "action"
    DEFAULT = "default"
    FAILED = "failed"


@dataclass(frozen=True)
class Outcome(Generic[S]):
    """Immutable result of one component run."""

    state: S
    resolution: Resolution
    duration_ms: float
    error: PageException | None = None


class ComponentFuture(Generic[S]):
    """Pending until the component task finishes, then resolved for good.

    Reading the state before resolution raises :class:`FuturePendingError`;
    use ``await future`` to suspend until it is available.
    """

    def __init__(self, component_id: str, task: asyncio.Task[Outcome[S]]) -> None:
        self._component_id = component_id
        self._task = task

    def __repr__(self) -> str:
        return f"<ComponentFuture {self._component_id!r} {self.status.value}>"

    @property
    def component_id(self) -> str:
        return self._component_id

    @property
    def status(self) -> FutureStatus:
        return FutureStatus.RESOLVED if self._task.done() else FutureStatus.PENDING

    def done(self) -> bool:
        return self._task.done()

    def outcome(self) -> Outcome[S]:
        if not self._task.done():
            raise FuturePendingError(self._component_id)
        return self._task.result()

    def result(self) -> S:
        return self.outcome().state

    @property
    def resolution(self) -> Resolution:
        return self.outcome().resolution

    @property
    def error(self) -> PageException | None:
        return self.outcome().error

    @property
    def duration_ms(self) -> float:
        return self.outcome().duration_ms

    async def wait(self) -> S:
        outcome = await self._task
        return outcome.state

    def __await__(self) -> Generator[Any, None, S]:
        return self.wait().__await__()
