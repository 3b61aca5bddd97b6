"""Default rendering collaborator: the page state as JSON."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict
from typing import Any

from fastapi.encoders import jsonable_encoder
from starlette.responses import JSONResponse

from fastapi_component_page.trace import PageTrace


class JSONRenderer:
    """Renders ``{"template", "state", "errors"}``; template syntax is not its concern."""

    def render(
        self,
        template: str,
        values: Mapping[str, Any],
        errors: Mapping[str, str],
        trace: PageTrace | None = None,
    ) -> JSONResponse:
        body: dict[str, Any] = {
            "template": template,
            "state": jsonable_encoder(dict(values), by_alias=True),
            "errors": dict(errors),
        }
        if trace is not None:
            body["trace"] = asdict(trace)
        return JSONResponse(body)
