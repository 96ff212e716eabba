"""Send-only half of a split channel."""

from __future__ import annotations

from typing import TYPE_CHECKING

from wsduplex.state.frames import Frame
from wsduplex.errors import ChannelSplitError

if TYPE_CHECKING:
    from .base import DuplexChannel


class SendHalf:
    def __init__(self, channel: DuplexChannel) -> None:
        self._channel = channel
        self._busy = False

    async def send(self, frame: Frame) -> None:
        if self._busy:
            raise ChannelSplitError("send half is owned by another task")
        self._busy = True
        try:
            await self._channel._guarded_send(frame)  # noqa: SLF001
        finally:
            self._busy = False


__all__ = ["SendHalf"]
