from .phase import SessionPhase
from .runtime import RuntimeDeps
from .verdict import Verdict
from .settings import AppSettings, ServerSettings, SessionSettings
from .outcome import RaceResult, UnitOutcome, SessionReport
from .frames import (
    Frame,
    PingFrame,
    PongFrame,
    TextFrame,
    CloseFrame,
    BinaryFrame,
    CloseReason,
)

__all__ = [
    "AppSettings",
    "BinaryFrame",
    "CloseFrame",
    "CloseReason",
    "Frame",
    "PingFrame",
    "PongFrame",
    "RaceResult",
    "RuntimeDeps",
    "ServerSettings",
    "SessionPhase",
    "SessionReport",
    "SessionSettings",
    "TextFrame",
    "UnitOutcome",
    "Verdict",
]
