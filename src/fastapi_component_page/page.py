"""Page composition — attach components, collect their futures."""

from __future__ import annotations

import asyncio
import time
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any

from fastapi_component_page._types import ComponentFn
from fastapi_component_page.component import Component, as_component
from fastapi_component_page.context import RequestContext
from fastapi_component_page.future import ComponentFuture, Resolution
from fastapi_component_page.runner import run
from fastapi_component_page.trace import PageTrace


class PageState(Mapping[str, ComponentFuture[Any]]):
    """Field name to component future, built once per request."""

    def __init__(
        self,
        futures: Mapping[str, ComponentFuture[Any]],
        *,
        template: str = "",
        debug: bool = False,
    ) -> None:
        self._futures = dict(futures)
        self._template = template
        self._debug = debug
        self._started = time.perf_counter()
        self._total_duration_ms: float | None = None

    def __getitem__(self, key: str) -> ComponentFuture[Any]:
        return self._futures[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._futures)

    def __len__(self) -> int:
        return len(self._futures)

    @property
    def template(self) -> str:
        return self._template

    def resolved(self) -> bool:
        return all(future.done() for future in self._futures.values())

    async def wait(self) -> dict[str, Any]:
        """Suspend until every future resolved; return field -> state."""
        await asyncio.gather(*(future.wait() for future in self._futures.values()))
        if self._total_duration_ms is None:
            self._total_duration_ms = (time.perf_counter() - self._started) * 1000
        return self.values_now()

    def values_now(self) -> dict[str, Any]:
        return {name: future.result() for name, future in self._futures.items()}

    def errors(self) -> dict[str, str]:
        """Error kind per field for components that resolved as FAILED."""
        out: dict[str, str] = {}
        for name, future in self._futures.items():
            outcome = future.outcome()
            if outcome.resolution is Resolution.FAILED and outcome.error is not None:
                out[name] = getattr(outcome.error, "kind", "internal")
        return out

    def trace(self) -> PageTrace | None:
        if not self._debug:
            return None
        return PageTrace.from_futures(self._futures, self._total_duration_ms or 0.0)


def compose(
    ctx: RequestContext,
    components: Mapping[str, Component[Any] | ComponentFn[Any]],
    *,
    template: str = "",
    debug: bool = False,
) -> PageState:
    """Run every component before awaiting any, so their fetches overlap."""
    futures = {name: run(ctx, comp) for name, comp in components.items()}
    return PageState(futures, template=template, debug=debug)


@dataclass(frozen=True)
class ResolvedPage:
    """Immutable, pre-computed page plan."""

    template: str
    components: tuple[tuple[str, Component[Any]], ...]
    debug: bool = False


class Page:
    """A top-level composition: a render target plus attached components."""

    def __init__(
        self,
        template: str,
        components: Mapping[str, Component[Any] | ComponentFn[Any]] | None = None,
        *,
        debug: bool = False,
    ) -> None:
        self._template = template
        self._items: dict[str, Component[Any]] = {}
        self._debug = debug
        self._resolved: ResolvedPage | None = None
        for name, comp in (components or {}).items():
            self.use(name, comp)

    @property
    def template(self) -> str:
        return self._template

    def use(self, field_name: str, target: Component[Any] | ComponentFn[Any]) -> Page:
        if field_name in self._items:
            raise ValueError(f"Field {field_name!r} is already attached")
        self._items[field_name] = as_component(target)
        self._resolved = None
        return self

    def resolve(self) -> ResolvedPage:
        if self._resolved is None:
            self._resolved = ResolvedPage(
                template=self._template,
                components=tuple(self._items.items()),
                debug=self._debug,
            )
        return self._resolved

    def compose(self, ctx: RequestContext) -> PageState:
        resolved = self.resolve()
        return compose(
            ctx,
            dict(resolved.components),
            template=resolved.template,
            debug=resolved.debug,
        )
