"""Receive-only half of a split channel."""

from __future__ import annotations

from typing import TYPE_CHECKING

from wsduplex.state.frames import Frame
from wsduplex.errors import ChannelSplitError

if TYPE_CHECKING:
    from .base import DuplexChannel


class RecvHalf:
    def __init__(self, channel: DuplexChannel) -> None:
        self._channel = channel
        self._busy = False

    async def recv(self) -> Frame | None:
        if self._busy:
            raise ChannelSplitError("receive half is owned by another task")
        self._busy = True
        try:
            return await self._channel._guarded_recv()  # noqa: SLF001
        finally:
            self._busy = False


__all__ = ["RecvHalf"]
