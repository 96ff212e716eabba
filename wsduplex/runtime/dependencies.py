"""Runtime dependency construction."""

from __future__ import annotations

from wsduplex.state import RuntimeDeps
from wsduplex.state.settings import AppSettings
from wsduplex.telemetry.sink import EventSink
from wsduplex.telemetry.logging_sink import LoggingEventSink

from .settings_loader import load_settings


def build_runtime_deps(
    settings: AppSettings | None = None,
    sink: EventSink | None = None,
) -> RuntimeDeps:
    return RuntimeDeps(
        settings=settings or load_settings(),
        sink=sink or LoggingEventSink(),
    )


__all__ = ["RuntimeDeps", "build_runtime_deps"]
