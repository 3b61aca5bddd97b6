"""Tests for the structlog-backed log formatting."""

from __future__ import annotations

import io
import json
import logging
import sys

import pytest

from fastapi_component_page.logging_config import (
    HANDLER_NAME,
    UVICORN_LOGGERS,
    build_formatter,
    configure,
)


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def _record(msg: str, *args: object, level: int = logging.ERROR, **extra: object):
    record = logging.makeLogRecord(
        {
            "name": "fastapi_component_page.components.blocks",
            "levelno": level,
            "levelname": logging.getLevelName(level),
            "msg": msg,
            "args": args,
        }
    )
    record.__dict__.update(extra)
    return record


class TestBuildFormatter:
    def test_json_line_carries_message_level_and_logger(self) -> None:
        line = build_formatter(json_output=True).format(
            _record("Failed to query HTTP: %s", "connection refused")
        )
        data = json.loads(line)
        assert data["event"] == "Failed to query HTTP: connection refused"
        assert data["level"] == "error"
        assert data["logger"] == "fastapi_component_page.components.blocks"
        assert "timestamp" in data

    def test_json_includes_extra_fields(self) -> None:
        line = build_formatter(json_output=True).format(
            _record("New block info fetched", level=logging.INFO, height="12345")
        )
        assert json.loads(line)["height"] == "12345"

    def test_json_renders_traceback(self) -> None:
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            record = _record("Component raised", exc_info=sys.exc_info())
        data = json.loads(build_formatter(json_output=True).format(record))
        assert "RuntimeError: boom" in data["exception"]

    def test_console_line_is_plain_text(self) -> None:
        line = build_formatter(json_output=False).format(
            _record("Failed to unmarshal response: %s", "bad")
        )
        assert "Failed to unmarshal response: bad" in line
        assert "error" in line
        assert not line.lstrip().startswith("{")


class TestConfigure:
    def test_writes_to_given_stream(self) -> None:
        out = io.StringIO()
        configure(json_output=True, stream=out)
        logging.getLogger("fastapi_component_page.test").warning("upstream slow")
        assert json.loads(out.getvalue().splitlines()[-1])["event"] == "upstream slow"

    def test_reconfigure_replaces_only_own_handler(self) -> None:
        root = logging.getLogger()
        foreign = logging.NullHandler()
        root.addHandler(foreign)
        first = configure(stream=io.StringIO())
        second = configure(stream=io.StringIO())
        ours = [h for h in root.handlers if h.get_name() == HANDLER_NAME]
        assert ours == [second]
        assert first not in root.handlers
        assert foreign in root.handlers

    @pytest.mark.parametrize(
        ("name", "expected"),
        [("debug", logging.DEBUG), ("WARNING", logging.WARNING), ("chatty", logging.INFO)],
    )
    def test_level(self, name: str, expected: int) -> None:
        configure(level=name, stream=io.StringIO())
        assert logging.getLogger().level == expected

    def test_uvicorn_loggers_defer_to_root(self) -> None:
        logging.getLogger("uvicorn.access").addHandler(logging.NullHandler())
        configure(stream=io.StringIO())
        for name in UVICORN_LOGGERS:
            assert logging.getLogger(name).handlers == []
            assert logging.getLogger(name).propagate is True
