"""Session lifecycle phases."""

from __future__ import annotations

import enum


class SessionPhase(enum.Enum):
    HANDSHAKE = "handshake"
    GREETING = "greeting"
    DUPLEX = "duplex"
    TERMINATED = "terminated"


# Strict order; TERMINATED may follow any phase.
PHASE_ORDER: tuple[SessionPhase, ...] = (
    SessionPhase.HANDSHAKE,
    SessionPhase.GREETING,
    SessionPhase.DUPLEX,
    SessionPhase.TERMINATED,
)

__all__ = ["PHASE_ORDER", "SessionPhase"]
