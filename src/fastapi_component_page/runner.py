"""Component runner — schedules components and hands back their futures."""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Any

from fastapi_component_page._types import ComponentFn
from fastapi_component_page.component import Component, as_component
from fastapi_component_page.context import RequestContext
from fastapi_component_page.exceptions import ComponentInternalError
from fastapi_component_page.future import ComponentFuture, Outcome, Resolution

logger = logging.getLogger(__name__)


def run(
    ctx: RequestContext, target: Component[Any] | ComponentFn[Any]
) -> ComponentFuture[Any]:
    """Schedule ``target`` in its own child context and return immediately.

    Must be called from a running event loop. The returned future always
    resolves; failures surface as a ``FAILED`` resolution, never an exception.
    """
    comp = as_component(target)
    child = ctx.for_component(comp.name)
    task = asyncio.create_task(_execute(comp, child), name=f"component:{comp.name}")
    return ComponentFuture(comp.name, task)


async def _execute(comp: Component[Any], ctx: RequestContext) -> Outcome[Any]:
    start = time.perf_counter()
    try:
        state = await comp(ctx)
    except Exception as exc:
        logger.exception("Component %r raised; resolving with empty state", comp.name)
        return Outcome(
            state=comp.empty_state(),
            resolution=Resolution.FAILED,
            duration_ms=(time.perf_counter() - start) * 1000,
            error=ComponentInternalError(f"Component {comp.name!r} failed", cause=exc),
        )

    if ctx.error is not None:
        resolution = Resolution.FAILED
    elif ctx.handled:
        resolution = Resolution.ACTION
    else:
        resolution = Resolution.DEFAULT

    return Outcome(
        state=state,
        resolution=resolution,
        duration_ms=(time.perf_counter() - start) * 1000,
        error=ctx.error,
    )
