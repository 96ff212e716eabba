"""Scripted greeting phase run before the channel is split."""

from __future__ import annotations

import asyncio

from wsduplex.errors import SendError
from wsduplex.state.frames import TextFrame
from wsduplex.channel.base import DuplexChannel
from wsduplex.telemetry.sink import EventSink
from wsduplex.state.settings import SessionSettings


async def run_greeting(channel: DuplexChannel, settings: SessionSettings, sink: EventSink) -> bool:
    for i in range(1, settings.greeting_count + 1):
        text = settings.greeting_template.format(i=i)
        try:
            await channel.send(TextFrame(text))
        except SendError as exc:
            sink.log("session.disconnected_abruptly", {"phase": "greeting", "sent": i - 1, "error": str(exc)})
            return False
        sink.log("greeting.sent", {"index": i, "text": text})
        await asyncio.sleep(settings.greeting_interval_s)

    sink.log("greeting.complete", {"sent": settings.greeting_count})
    return True


__all__ = ["run_greeting"]
