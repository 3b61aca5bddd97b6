"""Component — a named context receiver producing one state value."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic

from fastapi_component_page._types import ComponentFn, EmptyFactory, S
from fastapi_component_page.context import RequestContext


@dataclass(frozen=True)
class Component(Generic[S]):
    """A component function plus the metadata the runner and registry need.

    ``actions`` lists the action names the function dispatches, so the
    action endpoint can tell a known action from a miss before running it.
    ``empty`` builds the zero state used when the component fails.
    """

    name: str
    fn: ComponentFn[S]
    actions: tuple[str, ...] = ()
    empty: EmptyFactory[S] | None = None

    async def __call__(self, ctx: RequestContext) -> S:
        return await self.fn(ctx)

    def empty_state(self) -> Any:
        return self.empty() if self.empty is not None else None


def as_component(target: Component[Any] | ComponentFn[Any]) -> Component[Any]:
    """Wrap a bare component function, using its ``__name__`` as id."""
    if isinstance(target, Component):
        return target
    return Component(name=getattr(target, "__name__", type(target).__name__), fn=target)


def component(
    name: str | None = None,
    *,
    actions: tuple[str, ...] = (),
    empty: EmptyFactory[Any] | None = None,
):
    """Decorator turning a component function into a :class:`Component`."""

    def decorator(fn: ComponentFn[Any]) -> Component[Any]:
        return Component(name=name or fn.__name__, fn=fn, actions=actions, empty=empty)

    return decorator
