"""Duplex channel with one-way split into owned send/receive halves."""

from __future__ import annotations

import abc

from wsduplex.state.frames import Frame
from wsduplex.errors import SendError, ReceiveError, ChannelSplitError

from .recv_half import RecvHalf
from .send_half import SendHalf


class DuplexChannel(abc.ABC):
    """A bidirectional frame channel owned by exactly one session.

    Before `split()` the session drives the whole channel from a single task.
    `split()` hands out a send-only and a receive-only half, each meant for
    exactly one concurrent unit of work; from then on the whole-channel
    `send`/`recv` are off limits. `terminate()` is final: no frame is sent or
    accepted afterwards.

    Subclasses implement `_send_frame` and `_recv_frame`. `_send_frame` must
    raise `SendError` on any transport failure. `_recv_frame` returns the next
    frame, `None` once the inbound stream is exhausted, and raises
    `ReceiveError` on an abrupt disconnect or a malformed frame.
    """

    def __init__(self) -> None:
        self._split = False
        self._terminated = False

    @property
    def is_split(self) -> bool:
        return self._split

    @property
    def terminated(self) -> bool:
        return self._terminated

    async def send(self, frame: Frame) -> None:
        self._ensure_whole()
        await self._guarded_send(frame)

    async def recv(self) -> Frame | None:
        self._ensure_whole()
        return await self._guarded_recv()

    def split(self) -> tuple[SendHalf, RecvHalf]:
        if self._split:
            raise ChannelSplitError("channel is already split")
        if self._terminated:
            raise ChannelSplitError("cannot split a terminated channel")
        self._split = True
        return SendHalf(self), RecvHalf(self)

    def terminate(self) -> None:
        self._terminated = True

    def _ensure_whole(self) -> None:
        if self._split:
            raise ChannelSplitError("channel was split; use its send and receive halves")

    async def _guarded_send(self, frame: Frame) -> None:
        if self._terminated:
            raise SendError("session terminated")
        await self._send_frame(frame)

    async def _guarded_recv(self) -> Frame | None:
        if self._terminated:
            raise ReceiveError("session terminated")
        return await self._recv_frame()

    @abc.abstractmethod
    async def _send_frame(self, frame: Frame) -> None: ...

    @abc.abstractmethod
    async def _recv_frame(self) -> Frame | None: ...


__all__ = ["DuplexChannel"]
