"""PageTrace and TraceEntry — debug execution recording."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Literal

from fastapi_component_page.future import ComponentFuture


@dataclass(frozen=True)
class TraceEntry:
    """Single component execution record."""

    field_name: str
    component_name: str
    duration_ms: float
    outcome: Literal["ACTION", "DEFAULT", "FAILED"]
    reason: str | None = None


@dataclass
class PageTrace:
    """Structured record of a single page composition."""

    entries: list[TraceEntry] = field(default_factory=list)
    total_duration_ms: float = 0.0

    @classmethod
    def from_futures(
        cls, futures: Mapping[str, ComponentFuture[Any]], total_duration_ms: float
    ) -> PageTrace:
        entries = []
        for name, future in futures.items():
            outcome = future.outcome()
            entries.append(
                TraceEntry(
                    field_name=name,
                    component_name=future.component_id,
                    duration_ms=outcome.duration_ms,
                    outcome=outcome.resolution.name,  # type: ignore[arg-type]
                    reason=str(outcome.error) if outcome.error is not None else None,
                )
            )
        return cls(entries=entries, total_duration_ms=total_duration_ms)
