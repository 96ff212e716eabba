"""Inbound frame classification shared by every phase that reads."""

from __future__ import annotations

from wsduplex.state.verdict import Verdict
from wsduplex.telemetry.sink import EventSink
from wsduplex.state.frames import (
    Frame,
    PingFrame,
    PongFrame,
    TextFrame,
    CloseFrame,
    BinaryFrame,
)


def classify_frame(frame: Frame, sink: EventSink) -> Verdict:
    """Log *frame* and decide whether the reading phase may continue.

    A close frame is the only thing that yields `Verdict.BREAK`. Pings are
    answered by the transport, so they produce no event and no action.
    """
    if isinstance(frame, TextFrame):
        sink.log("frame.text", {"text": frame.payload})
    elif isinstance(frame, BinaryFrame):
        sink.log("frame.binary", {"bytes": len(frame.payload), "data": frame.payload})
    elif isinstance(frame, PongFrame):
        sink.log("frame.pong", {"data": frame.payload})
    elif isinstance(frame, PingFrame):
        pass
    elif isinstance(frame, CloseFrame):
        if frame.reason is None:
            sink.log("frame.close_without_reason", {})
        else:
            sink.log("frame.close", {"code": frame.reason.code, "reason": frame.reason.text})
        return Verdict.BREAK
    else:
        raise TypeError(f"unsupported frame type: {type(frame).__name__}")
    return Verdict.CONTINUE


__all__ = ["classify_frame"]
