"""Per-session scoping for an EventSink."""

from __future__ import annotations

from typing import Any
from collections.abc import Mapping

from .sink import EventSink


class BoundEventSink:
    """Merge fixed fields (the session's peer address) into every event."""

    def __init__(self, sink: EventSink, **bound: Any) -> None:
        self._sink = sink
        self._bound = bound

    @property
    def bound(self) -> Mapping[str, Any]:
        return dict(self._bound)

    def log(self, event: str, fields: Mapping[str, Any]) -> None:
        self._sink.log(event, {**self._bound, **fields})


__all__ = ["BoundEventSink"]
