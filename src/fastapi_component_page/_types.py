"""Shared type aliases and protocols."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping
from typing import TYPE_CHECKING, Any, Protocol, TypeVar

from fastapi_component_page.context import RequestContext

if TYPE_CHECKING:
    from starlette.responses import Response

S = TypeVar("S")

# A component is a context receiver returning its state
ComponentFn = Callable[[RequestContext], Awaitable[S]]
ActionHandler = Callable[..., Any]
EmptyFactory = Callable[[], S]


class Renderer(Protocol):
    """Turns a resolved page into an HTTP response."""

    def render(
        self,
        template: str,
        values: Mapping[str, Any],
        errors: Mapping[str, str],
        trace: Any | None = None,
    ) -> Response: ...
