"""RequestContext — per-request state container."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any

from starlette.requests import Request

if TYPE_CHECKING:
    from fastapi_component_page.exceptions import PageException


@dataclass(frozen=True)
class ActionInvocation:
    """A named action call carried by the inbound request."""

    name: str
    args: tuple[Any, ...] = ()
    component: str | None = None


@dataclass
class RequestContext:
    """Lightweight per-request state container handed to every component."""

    request: Request
    action: ActionInvocation | None = None
    component_id: str | None = None
    handled: bool = False
    error: PageException | None = None
    state: dict[str, Any] = field(default_factory=dict)

    def for_component(self, component_id: str) -> RequestContext:
        """Child context for one component; shares request, action and state."""
        return replace(self, component_id=component_id, handled=False, error=None)
