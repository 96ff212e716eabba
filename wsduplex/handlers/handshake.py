"""Initial liveness probe: one ping out, one frame of any kind back."""

from __future__ import annotations

from wsduplex.state.verdict import Verdict
from wsduplex.state.frames import PingFrame
from wsduplex.channel.base import DuplexChannel
from wsduplex.telemetry.sink import EventSink
from wsduplex.errors import SendError, ReceiveError
from wsduplex.state.settings import SessionSettings

from .classify import classify_frame


async def run_handshake(channel: DuplexChannel, settings: SessionSettings, sink: EventSink) -> bool:
    """Return True when the session may move on to the greeting phase.

    There is no retry and no timeout: the single reply is awaited for as long
    as the peer keeps the connection open.
    """
    try:
        await channel.send(PingFrame(settings.ping_payload))
    except SendError as exc:
        sink.log("handshake.ping_failed", {"error": str(exc)})
        return False
    sink.log("handshake.ping_sent", {"data": settings.ping_payload})

    try:
        frame = await channel.recv()
    except ReceiveError as exc:
        sink.log("session.disconnected_abruptly", {"phase": "handshake", "error": str(exc)})
        return False
    if frame is None:
        sink.log("handshake.no_reply", {})
        return False

    return classify_frame(frame, sink) is Verdict.CONTINUE


__all__ = ["run_handshake"]
