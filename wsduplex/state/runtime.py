"""Typed runtime state objects for dependency wiring."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from wsduplex.state.settings import AppSettings
    from wsduplex.telemetry.sink import EventSink


@dataclass(slots=True)
class RuntimeDeps:
    settings: AppSettings
    sink: EventSink


__all__ = ["RuntimeDeps"]
