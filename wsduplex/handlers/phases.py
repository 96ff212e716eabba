"""Phase bookkeeping for one session."""

from __future__ import annotations

from wsduplex.errors import PhaseOrderError
from wsduplex.telemetry.sink import EventSink
from wsduplex.state.phase import PHASE_ORDER, SessionPhase


class PhaseTracker:
    """Enforce Handshake -> Greeting -> Duplex -> Terminated.

    `advance` only accepts the immediate successor of the current phase.
    `terminate` is accepted from any live phase, exactly once.
    """

    def __init__(self, sink: EventSink) -> None:
        self._sink = sink
        self._history: list[SessionPhase] = []

    @property
    def current(self) -> SessionPhase | None:
        return self._history[-1] if self._history else None

    @property
    def history(self) -> tuple[SessionPhase, ...]:
        return tuple(self._history)

    @property
    def terminated(self) -> bool:
        return self.current is SessionPhase.TERMINATED

    def advance(self, phase: SessionPhase) -> None:
        if self.terminated:
            raise PhaseOrderError(f"session already terminated; cannot enter {phase.value}")
        expected = PHASE_ORDER[len(self._history)]
        if phase is not expected:
            current = self.current.value if self.current else "start"
            raise PhaseOrderError(f"cannot move from {current} to {phase.value}; expected {expected.value}")
        self._enter(phase)

    def terminate(self) -> None:
        if self.terminated:
            raise PhaseOrderError("session already terminated")
        self._enter(SessionPhase.TERMINATED)

    def _enter(self, phase: SessionPhase) -> None:
        self._history.append(phase)
        self._sink.log("session.phase", {"phase": phase.value})


__all__ = ["PhaseTracker"]
