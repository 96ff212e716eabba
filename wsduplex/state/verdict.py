"""Classification verdict for inbound frames."""

from __future__ import annotations

import enum


class Verdict(enum.Enum):
    CONTINUE = "continue"
    BREAK = "break"


__all__ = ["Verdict"]
