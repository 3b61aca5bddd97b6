"""Built-in page components."""

from fastapi_component_page.components.blocks import (
    GET_BLOCK_INFO,
    RELOAD_BLOCK,
    block_info_component,
)

__all__ = [
    "GET_BLOCK_INFO",
    "RELOAD_BLOCK",
    "block_info_component",
]
