"""Race the duplex units; the first to finish cancels the other."""

from __future__ import annotations

import asyncio
from typing import Any
from collections.abc import Coroutine

from wsduplex.telemetry.sink import EventSink
from wsduplex.state.outcome import UnitName, RaceResult, UnitOutcome

UnitCoro = Coroutine[Any, Any, int]


def _discard_outcome(task: asyncio.Task[int]) -> None:
    # The loser's result is never observed; retrieve it so asyncio stays quiet.
    if not task.cancelled():
        task.exception()


def unit_outcome(unit: UnitName, task: asyncio.Task[int]) -> UnitOutcome:
    if task.cancelled():
        return UnitOutcome(unit=unit, cancelled=True)
    exc = task.exception()
    if exc is not None:
        return UnitOutcome(unit=unit, error=f"{type(exc).__name__}: {exc}")
    return UnitOutcome(unit=unit, count=task.result())


def _log_outcome(outcome: UnitOutcome, sink: EventSink) -> None:
    if outcome.ok:
        event = "duplex.sent" if outcome.unit == "sender" else "duplex.received"
        sink.log(event, {"count": outcome.count})
    else:
        sink.log("duplex.unit_failed", {"unit": outcome.unit, "error": outcome.error, "cancelled": outcome.cancelled})


async def supervise(sender: UnitCoro, receiver: UnitCoro, sink: EventSink) -> RaceResult:
    """Run *sender* and *receiver* as independent tasks and race them.

    The outcome of whichever finishes first is recorded and the other task is
    cancelled without waiting for it to unwind. If both are already done when
    the race resolves, the receiver is reported: a peer close also fails the
    sender's next write, and the close is what ended the exchange.
    """
    tasks: dict[UnitName, asyncio.Task[int]] = {
        "sender": asyncio.create_task(sender),
        "receiver": asyncio.create_task(receiver),
    }
    try:
        done, _pending = await asyncio.wait(tasks.values(), return_when=asyncio.FIRST_COMPLETED)
    except asyncio.CancelledError:
        for task in tasks.values():
            task.cancel()
        raise

    winner: UnitName = "receiver" if tasks["receiver"] in done else "sender"
    loser: UnitName = "sender" if winner == "receiver" else "receiver"

    outcome = unit_outcome(winner, tasks[winner])
    _log_outcome(outcome, sink)

    tasks[loser].add_done_callback(_discard_outcome)
    tasks[loser].cancel()
    return RaceResult(winner=outcome, cancelled_unit=loser)


__all__ = ["supervise", "unit_outcome"]
