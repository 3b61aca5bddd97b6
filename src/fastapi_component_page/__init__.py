"""FastAPI Component Page - asynchronous component-state pages for FastAPI."""

from fastapi_component_page.actions import (
    ActionMatch,
    ActionMiss,
    ActionRegistry,
    dispatch,
    parse_action_name,
    parse_invocation,
)
from fastapi_component_page.app import create_app
from fastapi_component_page.component import Component, as_component, component
from fastapi_component_page.components.blocks import (
    GET_BLOCK_INFO,
    RELOAD_BLOCK,
    block_info_component,
)
from fastapi_component_page.config import Settings, get_settings
from fastapi_component_page.context import ActionInvocation, RequestContext
from fastapi_component_page.dependency import (
    ActionPayload,
    action_dependency,
    page_dependency,
)
from fastapi_component_page.exceptions import (
    ComponentInternalError,
    ComponentNotFound,
    DecodeError,
    FetchError,
    FuturePendingError,
    PageAbort,
    PageException,
    TransportError,
)
from fastapi_component_page.fetcher import BlockFetcher, decode_block_info
from fastapi_component_page.future import (
    ComponentFuture,
    FutureStatus,
    Outcome,
    Resolution,
)
from fastapi_component_page.models import Block, BlockHeader, BlockInfo
from fastapi_component_page.page import Page, PageState, ResolvedPage, compose
from fastapi_component_page.render import JSONRenderer
from fastapi_component_page.runner import run
from fastapi_component_page.trace import PageTrace, TraceEntry

__all__ = [
    "GET_BLOCK_INFO",
    "RELOAD_BLOCK",
    "ActionInvocation",
    "ActionMatch",
    "ActionMiss",
    "ActionPayload",
    "ActionRegistry",
    "Block",
    "BlockFetcher",
    "BlockHeader",
    "BlockInfo",
    "Component",
    "ComponentFuture",
    "ComponentInternalError",
    "ComponentNotFound",
    "DecodeError",
    "FetchError",
    "FuturePendingError",
    "FutureStatus",
    "JSONRenderer",
    "Outcome",
    "Page",
    "PageAbort",
    "PageException",
    "PageState",
    "PageTrace",
    "RequestContext",
    "Resolution",
    "ResolvedPage",
    "Settings",
    "TraceEntry",
    "TransportError",
    "action_dependency",
    "as_component",
    "block_info_component",
    "compose",
    "create_app",
    "decode_block_info",
    "dispatch",
    "get_settings",
    "page_dependency",
    "parse_action_name",
    "parse_invocation",
    "run",
]
