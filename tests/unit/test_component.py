"""Tests for Component and the component decorator."""

from __future__ import annotations

import dataclasses
from typing import Any

import pytest

from fastapi_component_page.component import Component, as_component, component
from fastapi_component_page.context import RequestContext


async def counter(ctx: RequestContext) -> int:
    ctx.state["calls"] = ctx.state.get("calls", 0) + 1
    return ctx.state["calls"]


class TestComponent:
    async def test_call_delegates_to_fn(self, make_request: Any) -> None:
        comp = Component(name="Counter", fn=counter)
        ctx = RequestContext(request=make_request())
        assert await comp(ctx) == 1
        assert await comp(ctx) == 2

    def test_is_frozen(self) -> None:
        comp = Component(name="Counter", fn=counter)
        with pytest.raises(dataclasses.FrozenInstanceError):
            comp.name = "x"  # type: ignore[misc]

    def test_empty_state_defaults_to_none(self) -> None:
        assert Component(name="Counter", fn=counter).empty_state() is None

    def test_empty_state_uses_factory(self) -> None:
        comp = Component(name="Counter", fn=counter, empty=dict)
        first = comp.empty_state()
        assert first == {}
        assert comp.empty_state() is not first


class TestAsComponent:
    def test_passes_components_through(self) -> None:
        comp = Component(name="Counter", fn=counter)
        assert as_component(comp) is comp

    def test_wraps_function_with_its_name(self) -> None:
        comp = as_component(counter)
        assert comp.name == "counter"
        assert comp.fn is counter
        assert comp.actions == ()


class TestDecorator:
    def test_defaults_to_function_name(self) -> None:
        @component()
        async def latest(ctx: RequestContext) -> str:
            return "x"

        assert isinstance(latest, Component)
        assert latest.name == "latest"

    async def test_explicit_metadata(self, make_request: Any) -> None:
        @component("Latest", actions=("Reload",), empty=str)
        async def latest(ctx: RequestContext) -> str:
            return "x"

        assert latest.name == "Latest"
        assert latest.actions == ("Reload",)
        assert latest.empty_state() == ""
        assert await latest(RequestContext(request=make_request())) == "x"
