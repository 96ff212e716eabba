"""Wire-level frames exchanged over a session channel."""

from __future__ import annotations

from dataclasses import dataclass

MAX_CLOSE_CODE = 0xFFFF


@dataclass(frozen=True, slots=True)
class CloseReason:
    code: int
    text: str = ""

    def __post_init__(self) -> None:
        if not 0 <= self.code <= MAX_CLOSE_CODE:
            raise ValueError(f"close code must fit in 16 bits, got {self.code}")


@dataclass(frozen=True, slots=True)
class TextFrame:
    payload: str


@dataclass(frozen=True, slots=True)
class BinaryFrame:
    payload: bytes


@dataclass(frozen=True, slots=True)
class PingFrame:
    payload: bytes = b""


@dataclass(frozen=True, slots=True)
class PongFrame:
    payload: bytes = b""


@dataclass(frozen=True, slots=True)
class CloseFrame:
    reason: CloseReason | None = None


Frame = TextFrame | BinaryFrame | PingFrame | PongFrame | CloseFrame

__all__ = [
    "BinaryFrame",
    "CloseFrame",
    "CloseReason",
    "Frame",
    "MAX_CLOSE_CODE",
    "PingFrame",
    "PongFrame",
    "TextFrame",
]
