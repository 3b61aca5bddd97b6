"""Upstream REST fetch and decode for the latest block."""

from __future__ import annotations

import httpx
from pydantic import ValidationError

from fastapi_component_page.exceptions import DecodeError, TransportError
from fastapi_component_page.models import BlockInfo

LATEST_BLOCK_ROUTE = "/cosmos/base/tendermint/v1beta1/blocks/latest"


def decode_block_info(raw: bytes | str) -> BlockInfo:
    """Decode a latest-block body; invalid JSON and bad shapes raise DecodeError."""
    try:
        return BlockInfo.model_validate_json(raw)
    except ValidationError as exc:
        raise DecodeError(f"invalid block payload: {exc}", cause=exc) from exc


class BlockFetcher:
    """Issues one GET per call against a node's REST address.

    The ``httpx.AsyncClient`` is shared across requests and owned by the
    caller. No retry, no caching.
    """

    def __init__(self, client: httpx.AsyncClient, rest_addr: str) -> None:
        self._client = client
        self._endpoint = rest_addr.rstrip("/") + LATEST_BLOCK_ROUTE

    @property
    def endpoint(self) -> str:
        return self._endpoint

    async def fetch_latest_block(self) -> bytes:
        try:
            async with self._client.stream(
                "GET", self._endpoint, headers={"Accept": "application/json"}
            ) as response:
                return await response.aread()
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise TransportError(f"GET {self._endpoint}: {exc}", cause=exc) from exc

    async def fetch_block_info(self) -> BlockInfo:
        return decode_block_info(await self.fetch_latest_block())
