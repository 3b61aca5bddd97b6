"""
Latest block page.

Demonstrates:
- Building the app from environment settings
- GET / renders the page with the latest block
- POST /internal/actions/GetBlockInfo reloads only the block component
"""

from fastapi_component_page import create_app, get_settings
from fastapi_component_page.logging_config import configure

settings = get_settings()
configure(json_output=settings.log_json, level=settings.log_level)
app = create_app(settings)


if __name__ == "__main__":
    import uvicorn

    host, port = settings.bind()
    uvicorn.run(app, host=host, port=port, log_config=None)

    # Test with:
    # UPSTREAM_ADDR=http://localhost:1317 python examples/01_block_page.py
    # curl http://localhost:8080/
    # curl -X POST -H "Content-Type: application/json" \
    #      -d '{"action": "Reload Block"}' \
    #      http://localhost:8080/internal/actions/GetBlockInfo
