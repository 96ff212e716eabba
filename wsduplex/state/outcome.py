"""Outcomes reported by duplex units and whole sessions."""

from __future__ import annotations

from typing import Literal
from dataclasses import dataclass

from .phase import SessionPhase

UnitName = Literal["sender", "receiver"]


@dataclass(frozen=True, slots=True)
class UnitOutcome:
    """What the supervisor observed for one duplex unit.

    `count` is set when the unit returned normally. A unit that faulted
    carries `error`; a unit stopped by cancellation has `cancelled=True`.
    """

    unit: UnitName
    count: int | None = None
    error: str | None = None
    cancelled: bool = False

    @property
    def ok(self) -> bool:
        return self.count is not None


@dataclass(frozen=True, slots=True)
class RaceResult:
    winner: UnitOutcome
    cancelled_unit: UnitName


@dataclass(frozen=True, slots=True)
class SessionReport:
    peer: str
    phases: tuple[SessionPhase, ...]
    aborted_in: SessionPhase | None = None
    race: RaceResult | None = None

    @property
    def reached_duplex(self) -> bool:
        return SessionPhase.DUPLEX in self.phases


__all__ = ["RaceResult", "SessionReport", "UnitName", "UnitOutcome"]
