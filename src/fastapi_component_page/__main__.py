"""Run the block page server: ``python -m fastapi_component_page``."""

from __future__ import annotations

import uvicorn

from fastapi_component_page.app import create_app
from fastapi_component_page.config import get_settings
from fastapi_component_page.logging_config import configure


def main() -> None:
    settings = get_settings()
    configure(json_output=settings.log_json, level=settings.log_level)
    host, port = settings.bind()
    uvicorn.run(create_app(settings), host=host, port=port, log_config=None)


if __name__ == "__main__":
    main()
