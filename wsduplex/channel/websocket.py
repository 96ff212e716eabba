"""DuplexChannel adapter over a `websockets` asyncio connection."""

from __future__ import annotations

import asyncio
import logging
import contextlib
from typing import Any

from websockets.frames import CloseCode
from websockets.exceptions import ConnectionClosed
from websockets.asyncio.connection import Connection

from wsduplex.errors import SendError, ReceiveError
from wsduplex.state.frames import (
    Frame,
    PingFrame,
    PongFrame,
    TextFrame,
    CloseFrame,
    BinaryFrame,
    CloseReason,
)

from .base import DuplexChannel

logger = logging.getLogger(__name__)


def _consume_outcome(fut: asyncio.Future[Any]) -> None:
    # Pong waiters fail with ConnectionClosed when the peer goes away first.
    if not fut.cancelled():
        fut.exception()


class WebSocketChannel(DuplexChannel):
    """Expose a `websockets` connection as a stream of `Frame` values.

    `websockets` answers inbound pings and swallows pongs on its own. To let
    the session observe the reply to its own liveness probe, the pong for
    the most recent ping sent through this channel is surfaced as a
    `PongFrame`, ordered against data messages by arrival.
    """

    def __init__(self, connection: Connection) -> None:
        super().__init__()
        self._connection = connection
        self._pending_pong: tuple[bytes, asyncio.Future[Any]] | None = None
        self._close_surfaced = False

    async def _send_frame(self, frame: Frame) -> None:
        try:
            await self._write(frame)
        except ConnectionClosed as exc:
            raise SendError(f"connection closed while sending {type(frame).__name__}") from exc
        except (TypeError, ValueError):
            raise
        except Exception as exc:
            logger.debug("WebSocket send failed", exc_info=True)
            raise SendError(f"could not send {type(frame).__name__}: {exc}") from exc

    async def _write(self, frame: Frame) -> None:
        conn = self._connection
        if isinstance(frame, (TextFrame, BinaryFrame)):
            await conn.send(frame.payload)
        elif isinstance(frame, PingFrame):
            waiter = asyncio.ensure_future(await conn.ping(frame.payload))
            waiter.add_done_callback(_consume_outcome)
            self._pending_pong = (frame.payload, waiter)
        elif isinstance(frame, PongFrame):
            await conn.pong(frame.payload)
        elif isinstance(frame, CloseFrame):
            if frame.reason is None:
                await conn.close()
            else:
                await conn.close(code=frame.reason.code, reason=frame.reason.text)
        else:
            raise TypeError(f"unsupported frame type: {type(frame).__name__}")

    async def _recv_frame(self) -> Frame | None:
        if self._close_surfaced:
            return None
        try:
            message = await self._next_message()
        except ConnectionClosed as exc:
            return self._close_frame_from(exc)
        except Exception as exc:
            logger.debug("WebSocket receive failed", exc_info=True)
            raise ReceiveError(f"receive failed: {exc}") from exc

        if isinstance(message, PongFrame):
            return message
        if isinstance(message, str):
            return TextFrame(message)
        return BinaryFrame(bytes(message))

    async def _next_message(self) -> str | bytes | PongFrame:
        pending = self._pending_pong
        if pending is None:
            return await self._connection.recv()

        payload, waiter = pending
        recv_task = asyncio.ensure_future(self._connection.recv())
        try:
            await asyncio.wait({recv_task, waiter}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            if not recv_task.done():
                # Cancelling recv() never loses a message; the next call picks it up.
                recv_task.cancel()
                with contextlib.suppress(asyncio.CancelledError):
                    await recv_task

        if recv_task.done() and not recv_task.cancelled():
            # A data message (or the close) arrived first; the pong stays pending.
            return recv_task.result()

        self._pending_pong = None
        if waiter.cancelled() or waiter.exception() is not None:
            return await self._connection.recv()
        return PongFrame(payload)

    def _close_frame_from(self, exc: ConnectionClosed) -> CloseFrame:
        rcvd = exc.rcvd
        if rcvd is None:
            raise ReceiveError("peer disconnected without a close frame") from exc
        self._close_surfaced = True
        if rcvd.code == CloseCode.NO_STATUS_RCVD:
            return CloseFrame(None)
        return CloseFrame(CloseReason(int(rcvd.code), rcvd.reason))


__all__ = ["WebSocketChannel"]
