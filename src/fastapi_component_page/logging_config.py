"""Render stdlib log records through structlog.

Modules log with ``logging.getLogger(__name__)``; this module only decides
how the records look. Call ``configure`` once at startup.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog

HANDLER_NAME = "fastapi_component_page"
UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def build_formatter(*, json_output: bool) -> structlog.stdlib.ProcessorFormatter:
    """Formatter turning a ``LogRecord`` into a console line or a JSON object."""
    pre_chain = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.ExtraAdder(),
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]
    if json_output:
        render = [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        render = [structlog.dev.ConsoleRenderer(colors=False)]

    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=pre_chain,
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, *render],
    )


def configure(
    *, json_output: bool = False, level: str = "INFO", stream: TextIO | None = None
) -> logging.Handler:
    """Install the package handler on the root logger, replacing a previous one.

    Handlers installed by others (test capture, embedding apps) are left alone.
    """
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(build_formatter(json_output=json_output))

    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == HANDLER_NAME:
            root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(logging.getLevelNamesMapping().get(level.upper(), logging.INFO))

    for name in UVICORN_LOGGERS:
        uv_logger = logging.getLogger(name)
        uv_logger.handlers.clear()
        uv_logger.propagate = True

    return handler
