"""Latest block component."""

from __future__ import annotations

import logging

from fastapi_component_page.actions import dispatch
from fastapi_component_page.component import Component
from fastapi_component_page.context import RequestContext
from fastapi_component_page.exceptions import DecodeError, TransportError
from fastapi_component_page.fetcher import BlockFetcher
from fastapi_component_page.models import BlockInfo

logger = logging.getLogger(__name__)

GET_BLOCK_INFO = "GetBlockInfo"
RELOAD_BLOCK = "Reload Block"


def block_info_component(fetcher: BlockFetcher) -> Component[BlockInfo]:
    """Component showing the latest block, refreshable via ``Reload Block``."""

    async def get_block_info(ctx: RequestContext) -> BlockInfo:
        async def fetch() -> BlockInfo:
            try:
                return await fetcher.fetch_block_info()
            except TransportError as exc:
                logger.error("Failed to query HTTP: %s", exc)
                ctx.error = exc
            except DecodeError as exc:
                logger.error("Failed to unmarshal response: %s", exc)
                ctx.error = exc
            return BlockInfo()

        state = BlockInfo()

        async def reload_block(*args: object) -> None:
            nonlocal state
            state = await fetch()
            logger.info("New block info fetched on block %s", state.height)

        if await dispatch(ctx, RELOAD_BLOCK, reload_block):
            return state

        return await fetch()

    return Component(
        name=GET_BLOCK_INFO,
        fn=get_block_info,
        actions=(RELOAD_BLOCK,),
        empty=BlockInfo,
    )
