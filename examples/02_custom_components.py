"""
Custom components example.

Demonstrates:
- Writing components with the @component decorator
- Handling a named action before the default path
- Composing several components into one page; their fetches overlap
"""

import asyncio
import random

from fastapi import Depends, FastAPI

from fastapi_component_page import (
    ActionRegistry,
    PageState,
    RequestContext,
    action_dependency,
    component,
    dispatch,
    page_dependency,
)
from fastapi_component_page.page import Page

app = FastAPI(title="Custom Components Example")


@component("Dice", actions=("Roll",), empty=int)
async def dice(ctx: RequestContext) -> int:
    """Rolls once per page render; the Roll action takes the number of sides."""
    value = 0

    def roll(sides: int = 6) -> None:
        nonlocal value
        value = random.randint(1, sides)

    if await dispatch(ctx, "Roll", roll):
        return value

    return random.randint(1, 6)


@component("Clock")
async def clock(ctx: RequestContext) -> str:
    """Simulates a slow upstream; does not delay the dice."""
    await asyncio.sleep(0.2)
    return "12:00"


index = Page("page.custom.html", {"dice": dice, "clock": clock})
registry = ActionRegistry(dice, clock)


@app.get("/")
async def index_page(state: PageState = Depends(page_dependency(index))):
    return state.values_now()


@app.post("/internal/actions/{component}")
async def component_action(future=Depends(action_dependency(registry))):
    return {"component": future.component_id, "state": future.result()}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)

    # Test with:
    # curl http://localhost:8000/
    # curl -X POST -H "Content-Type: application/json" \
    #      -d '{"action": "Roll", "args": [20]}' http://localhost:8000/internal/actions/Dice
