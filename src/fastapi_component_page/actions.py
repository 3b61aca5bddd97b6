"""Action dispatch and the startup-time action registry."""

from __future__ import annotations

import inspect
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from fastapi_component_page._types import ActionHandler, ComponentFn
from fastapi_component_page.component import Component, as_component
from fastapi_component_page.context import ActionInvocation, RequestContext
from fastapi_component_page.exceptions import ComponentNotFound

logger = logging.getLogger(__name__)

ADDRESS_SEPARATOR = ":"


def parse_action_name(raw: str) -> tuple[str | None, str]:
    """Split ``"<id>:<action>"`` into ``(id, action)``; bare names have no id."""
    component_id, sep, name = raw.partition(ADDRESS_SEPARATOR)
    if not sep:
        return None, raw
    return component_id or None, name


def parse_invocation(payload: Mapping[str, Any]) -> ActionInvocation:
    """Build an :class:`ActionInvocation` from an action request body."""
    component_id, name = parse_action_name(str(payload["action"]))
    args = payload.get("args") or ()
    return ActionInvocation(name=name, args=tuple(args), component=component_id)


async def dispatch(ctx: RequestContext, action_name: str, handler: ActionHandler) -> bool:
    """Run ``handler`` if the request carries a call to ``action_name``.

    Returns True when the handler ran. The handler is awaited inline when it
    is a coroutine function, so it completes before the caller decides
    whether to run its default path.
    """
    invocation = ctx.action
    if invocation is None or ctx.handled:
        return False

    if invocation.name != action_name or (
        invocation.component is not None and invocation.component != ctx.component_id
    ):
        logger.debug(
            "Action %r not handled by %r (checked %r)",
            invocation.name,
            ctx.component_id,
            action_name,
        )
        return False

    result = handler(*invocation.args)
    if inspect.isawaitable(result):
        await result
    ctx.handled = True
    return True


@dataclass(frozen=True)
class ActionMatch:
    component: Component[Any]
    invocation: ActionInvocation


@dataclass(frozen=True)
class ActionMiss:
    """An invocation the registry cannot route to a declared action."""

    invocation: ActionInvocation
    reason: str
    component: Component[Any] | None = None


class ActionRegistry:
    """Maps component ids to components and their declared action names."""

    def __init__(self, *components: Component[Any] | ComponentFn[Any]) -> None:
        self._components: dict[str, Component[Any]] = {}
        for item in components:
            self.register(item)

    def register(self, target: Component[Any] | ComponentFn[Any]) -> Component[Any]:
        comp = as_component(target)
        if comp.name in self._components:
            raise ValueError(f"Component {comp.name!r} is already registered")
        self._components[comp.name] = comp
        return comp

    def lookup(self, component_id: str) -> Component[Any]:
        try:
            return self._components[component_id]
        except KeyError:
            raise ComponentNotFound(component_id) from None

    def match(self, invocation: ActionInvocation) -> ActionMatch | ActionMiss:
        if invocation.component is None:
            return ActionMiss(invocation, "no target component")
        comp = self._components.get(invocation.component)
        if comp is None:
            return ActionMiss(invocation, "unknown component")
        if invocation.name not in comp.actions:
            return ActionMiss(invocation, "unknown action", component=comp)
        return ActionMatch(comp, invocation)

    def __contains__(self, component_id: object) -> bool:
        return component_id in self._components

    def __iter__(self):
        return iter(self._components.values())

    def __len__(self) -> int:
        return len(self._components)
