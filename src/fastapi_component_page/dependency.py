"""page_dependency() / action_dependency() — FastAPI-compatible dependency factories."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from dataclasses import replace
from typing import Any

from fastapi import HTTPException
from pydantic import BaseModel, Field
from starlette.requests import Request

from fastapi_component_page.actions import ActionMiss, ActionRegistry, parse_invocation
from fastapi_component_page.context import ActionInvocation, RequestContext
from fastapi_component_page.exceptions import PageAbort
from fastapi_component_page.future import ComponentFuture
from fastapi_component_page.page import Page, PageState, compose
from fastapi_component_page.runner import run

logger = logging.getLogger(__name__)


class ActionPayload(BaseModel):
    """Body of a component action call."""

    action: str = Field(min_length=1)
    args: list[Any] = Field(default_factory=list)

    def to_invocation(self, component_id: str) -> ActionInvocation:
        """Target ``component_id``; an ``"<id>:"`` prefix must name the same component."""
        invocation = parse_invocation(self.model_dump())
        if invocation.component not in (None, component_id):
            raise PageAbort(
                f"Action addressed to {invocation.component!r}, posted to {component_id!r}"
            )
        return replace(invocation, component=component_id)


def page_dependency(page: Page) -> Callable[..., Awaitable[PageState]]:
    """Return a dependency that composes ``page`` and waits for every component."""
    resolved = page.resolve()
    components = dict(resolved.components)

    async def dependency(request: Request) -> PageState:
        ctx = RequestContext(request=request)
        state = compose(
            ctx, components, template=resolved.template, debug=resolved.debug
        )
        await state.wait()
        return state

    return dependency


def action_dependency(
    registry: ActionRegistry,
) -> Callable[..., Awaitable[ComponentFuture[Any]]]:
    """Return a dependency that runs one component with the posted action."""

    async def dependency(
        request: Request, component: str, payload: ActionPayload
    ) -> ComponentFuture[Any]:
        try:
            comp = registry.lookup(component)
            invocation = payload.to_invocation(comp.name)
        except PageAbort as exc:
            raise HTTPException(status_code=exc.status_code, detail=exc.detail) from exc

        match = registry.match(invocation)
        if isinstance(match, ActionMiss):
            logger.debug(
                "Action %r on %r not declared (%s); running default path",
                invocation.name,
                comp.name,
                match.reason,
            )

        ctx = RequestContext(request=request, action=invocation)
        future = run(ctx, comp)
        await future
        return future

    return dependency
