"""Observability sink interface."""

from __future__ import annotations

from typing import Any, Protocol
from collections.abc import Mapping


class EventSink(Protocol):
    """Receives advisory session events. Nothing logged here affects control flow."""

    def log(self, event: str, fields: Mapping[str, Any]) -> None: ...


__all__ = ["EventSink"]
