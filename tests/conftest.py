"""Shared pytest fixtures for fastapi-component-page tests."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import httpx
import pytest
from starlette.requests import Request



@pytest.fixture
def make_request() -> Any:
    """Factory for creating mock Starlette Request objects."""

    def _make(
        method: str = "GET",
        path: str = "/",
        headers: dict[str, str] | None = None,
        query_string: str = "",
    ) -> Request:
        scope: dict[str, Any] = {
            "type": "http",
            "method": method,
            "path": path,
            "query_string": query_string.encode(),
            "headers": [
                (k.lower().encode(), v.encode()) for k, v in (headers or {}).items()
            ],
            "root_path": "",
        }
        return Request(scope)

    return _make


@pytest.fixture
def block_payload() -> dict[str, Any]:
    """Latest-block body as a Cosmos SDK node returns it (trimmed)."""
    return {
        "block_id": {"hash": "3q2+7w==", "part_set_header": {"total": 1}},
        "block": {
            "header": {
                "version": {"block": "11", "app": "0"},
                "chain_id": "testnet-1",
                "height": "12345",
                "time": "2024-05-01T12:00:00.123456Z",
                "proposer_address": "AAECAwQFBgcICQoLDA0ODxAREhM=",
            },
            "data": {"txs": []},
        },
    }


class UpstreamStub:
    """Callable MockTransport handler recording every upstream request."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._respond: Callable[[httpx.Request], httpx.Response] = lambda r: (
            httpx.Response(200, json={})
        )

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._respond(request)

    @property
    def calls(self) -> int:
        return len(self.requests)

    def respond_json(self, payload: Any, status_code: int = 200) -> None:
        body = json.dumps(payload).encode()
        self._respond = lambda r: httpx.Response(
            status_code, content=body, headers={"Content-Type": "application/json"}
        )

    def respond_bytes(self, body: bytes, status_code: int = 200) -> None:
        self._respond = lambda r: httpx.Response(status_code, content=body)

    def refuse(self) -> None:
        def _refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("[Errno 111] Connection refused", request=request)

        self._respond = _refuse

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))


@pytest.fixture
def upstream() -> UpstreamStub:
    return UpstreamStub()
