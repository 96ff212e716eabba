"""Per-connection session state machine."""

from __future__ import annotations

from wsduplex.state.phase import SessionPhase
from wsduplex.channel.base import DuplexChannel
from wsduplex.telemetry.sink import EventSink
from wsduplex.state.settings import SessionSettings
from wsduplex.state.outcome import RaceResult, SessionReport

from .phases import PhaseTracker
from .greeting import run_greeting
from .supervisor import supervise
from .handshake import run_handshake
from .duplex import run_sender, run_receiver


async def _run_phases(
    channel: DuplexChannel,
    tracker: PhaseTracker,
    settings: SessionSettings,
    sink: EventSink,
) -> tuple[SessionPhase | None, RaceResult | None]:
    tracker.advance(SessionPhase.HANDSHAKE)
    if not await run_handshake(channel, settings, sink):
        return SessionPhase.HANDSHAKE, None

    tracker.advance(SessionPhase.GREETING)
    if not await run_greeting(channel, settings, sink):
        return SessionPhase.GREETING, None

    tracker.advance(SessionPhase.DUPLEX)
    send_half, recv_half = channel.split()
    race = await supervise(
        run_sender(send_half, settings, sink),
        run_receiver(recv_half, sink),
        sink,
    )
    return None, race


async def run_session(
    channel: DuplexChannel,
    settings: SessionSettings,
    sink: EventSink,
    *,
    peer: str = "",
) -> SessionReport:
    """Drive one session from upgrade-complete to Terminated.

    The channel is terminated on every exit path, including unexpected
    errors and cancellation, so no frame is sent or accepted once this
    returns. `session.terminated` is logged on every one of those paths.
    """
    tracker = PhaseTracker(sink)
    aborted_in: SessionPhase | None = None
    race: RaceResult | None = None
    try:
        aborted_in, race = await _run_phases(channel, tracker, settings, sink)
    except BaseException:
        # cancelled or faulted: report the phase that was running
        aborted_in = tracker.current
        raise
    finally:
        channel.terminate()
        tracker.terminate()
        sink.log(
            "session.terminated",
            {"aborted_in": aborted_in.value if aborted_in else None, "phases": [p.value for p in tracker.history]},
        )
    return SessionReport(peer=peer, phases=tracker.history, aborted_in=aborted_in, race=race)


__all__ = ["run_session"]
