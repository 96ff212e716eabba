"""Shared error types for the duplex session server."""

from __future__ import annotations


class ChannelError(Exception):
    """Base class for transport failures on a session channel."""


class SendError(ChannelError):
    """Raised when a frame could not be written to the channel."""


class ReceiveError(ChannelError):
    """Raised when the channel broke or errored while reading."""


class ChannelSplitError(RuntimeError):
    """Raised on misuse of a split channel's ownership rules."""


class PhaseOrderError(RuntimeError):
    """Raised when a session phase would be skipped or revisited."""


__all__ = [
    "ChannelError",
    "ChannelSplitError",
    "PhaseOrderError",
    "ReceiveError",
    "SendError",
]
