"""PageException hierarchy for aborts and absorbed component failures."""

from __future__ import annotations

from typing import ClassVar


class PageException(Exception):
    """Base for all page exceptions."""


class PageAbort(PageException):
    """Controlled abort with HTTP status code and detail."""

    def __init__(self, detail: str, *, status_code: int = 400) -> None:
        super().__init__(detail)
        self.status_code = status_code
        self.detail = detail


class ComponentNotFound(PageAbort):
    """No component is registered under the requested id (404)."""

    def __init__(self, component_id: str) -> None:
        super().__init__(f"Unknown component: {component_id}", status_code=404)
        self.component_id = component_id


class FetchError(PageException):
    """Upstream data could not be turned into component state."""

    kind: ClassVar[str] = "fetch"

    def __init__(self, detail: str, *, cause: Exception | None = None) -> None:
        super().__init__(detail)
        self.detail = detail
        self.cause = cause


class TransportError(FetchError):
    """The upstream node could not be reached."""

    kind = "transport"


class DecodeError(FetchError):
    """The upstream body is not JSON or does not match the expected shape."""

    kind = "decode"


class ComponentInternalError(PageException):
    """Runner-level error wrapping an exception that escaped a component."""

    kind: ClassVar[str] = "internal"

    def __init__(self, detail: str, *, cause: Exception | None = None) -> None:
        super().__init__(detail)
        self.detail = detail
        self.cause = cause


class FuturePendingError(PageException):
    """A component future was read before it resolved."""

    def __init__(self, component_id: str) -> None:
        super().__init__(f"Component {component_id!r} has not resolved yet")
        self.component_id = component_id
