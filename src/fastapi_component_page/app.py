"""FastAPI application serving the block page and its component actions."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

import httpx
from fastapi import Depends, FastAPI
from fastapi.encoders import jsonable_encoder
from starlette.responses import Response

from fastapi_component_page._types import Renderer
from fastapi_component_page.actions import ActionRegistry
from fastapi_component_page.components.blocks import block_info_component
from fastapi_component_page.config import Settings, get_settings
from fastapi_component_page.dependency import action_dependency, page_dependency
from fastapi_component_page.fetcher import BlockFetcher
from fastapi_component_page.future import ComponentFuture
from fastapi_component_page.page import Page, PageState
from fastapi_component_page.render import JSONRenderer

logger = logging.getLogger(__name__)

INDEX_TEMPLATE = "page.index.html"
ACTION_ROUTE = "/internal/actions/{component}"


def make_client(settings: Settings) -> httpx.AsyncClient:
    """Shared upstream client; without an explicit timeout httpx's default applies."""
    if settings.upstream_timeout is None:
        return httpx.AsyncClient()
    return httpx.AsyncClient(timeout=settings.upstream_timeout)


def create_app(
    settings: Settings | None = None,
    *,
    client: httpx.AsyncClient | None = None,
    renderer: Renderer | None = None,
) -> FastAPI:
    """Build the app. A passed-in ``client`` stays owned by the caller."""
    settings = settings or get_settings()
    owns_client = client is None
    upstream = client if client is not None else make_client(settings)
    render = renderer if renderer is not None else JSONRenderer()

    fetcher = BlockFetcher(upstream, settings.upstream_addr)
    block = block_info_component(fetcher)
    registry = ActionRegistry(block)
    index = Page(INDEX_TEMPLATE, {"block": block}, debug=settings.debug)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info("Serving latest block from %s", fetcher.endpoint)
        yield
        if owns_client:
            await upstream.aclose()

    app = FastAPI(title="Latest block", lifespan=lifespan)
    app.state.settings = settings
    app.state.fetcher = fetcher
    app.state.registry = registry
    app.state.page = index

    @app.get("/")
    async def index_page(
        state: PageState = Depends(page_dependency(index)),  # noqa: B008
    ) -> Response:
        return render.render(
            state.template, state.values_now(), state.errors(), state.trace()
        )

    @app.post(ACTION_ROUTE)
    async def component_action(
        future: ComponentFuture[Any] = Depends(action_dependency(registry)),  # noqa: B008
    ) -> dict[str, Any]:
        error = future.error
        return {
            "component": future.component_id,
            "resolution": future.resolution.value,
            "state": jsonable_encoder(future.result(), by_alias=True),
            "error": getattr(error, "kind", None) if error is not None else None,
        }

    return app
