"""Sender and receiver units that run concurrently on a split channel."""

from __future__ import annotations

import asyncio

from wsduplex.state.verdict import Verdict
from wsduplex.telemetry.sink import EventSink
from wsduplex.channel.recv_half import RecvHalf
from wsduplex.channel.send_half import SendHalf
from wsduplex.errors import SendError, ReceiveError
from wsduplex.state.settings import SessionSettings
from wsduplex.state.frames import TextFrame, CloseFrame, CloseReason

from .classify import classify_frame


async def run_sender(half: SendHalf, settings: SessionSettings, sink: EventSink) -> int:
    """Push the scripted messages, then try a graceful close.

    Returns how many messages went out. A failed send ends the unit early
    with the partial count; a failed close is logged and changes nothing.
    """
    for i in range(settings.message_count):
        try:
            await half.send(TextFrame(settings.message_template.format(i=i)))
        except SendError as exc:
            sink.log("duplex.send_failed", {"sent": i, "error": str(exc)})
            return i
        await asyncio.sleep(settings.message_interval_s)

    sink.log("duplex.closing", {"code": settings.close_code, "reason": settings.close_reason})
    try:
        await half.send(CloseFrame(CloseReason(settings.close_code, settings.close_reason)))
    except SendError as exc:
        sink.log("duplex.close_failed", {"error": str(exc)})
    return settings.message_count


async def run_receiver(half: RecvHalf, sink: EventSink) -> int:
    """Classify inbound frames in arrival order until a close or an error.

    Returns the number of frames received, the terminating close included.
    Nothing is ever echoed back.
    """
    count = 0
    while True:
        try:
            frame = await half.recv()
        except ReceiveError as exc:
            sink.log("session.disconnected_abruptly", {"phase": "duplex", "error": str(exc)})
            break
        if frame is None:
            break
        count += 1
        if classify_frame(frame, sink) is Verdict.BREAK:
            break
    return count


__all__ = ["run_receiver", "run_sender"]
