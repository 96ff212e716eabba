from __future__ import annotations

import asyncio

import pytest

from wsduplex.state.phase import SessionPhase
from wsduplex.handlers.session import run_session
from wsduplex.errors import SendError, ChannelSplitError
from tests.helpers.fakes import FakeChannel, RecordingSink, make_session_settings
from wsduplex.state.frames import PingFrame, PongFrame, TextFrame, CloseFrame, CloseReason

ALL_PHASES = (
    SessionPhase.HANDSHAKE,
    SessionPhase.GREETING,
    SessionPhase.DUPLEX,
    SessionPhase.TERMINATED,
)


@pytest.mark.asyncio
async def test_full_session_runs_every_phase_once() -> None:
    channel = FakeChannel([PongFrame(b"\x01\x02\x03")], hang_when_drained=True)
    sink = RecordingSink()

    report = await run_session(channel, make_session_settings(), sink, peer="127.0.0.1:5000")

    assert report.peer == "127.0.0.1:5000"
    assert report.phases == ALL_PHASES
    assert report.aborted_in is None
    assert report.race is not None
    assert report.race.winner.unit == "sender"
    assert report.race.winner.count == 20
    assert report.race.cancelled_unit == "receiver"

    assert channel.sent[0] == PingFrame(b"\x01\x02\x03")
    assert channel.sent_texts == [f"Hi {i} times!" for i in range(1, 6)] + [
        f"Server message {i}..." for i in range(20)
    ]
    assert channel.sent[-1] == CloseFrame(CloseReason(1000, "Goodbye"))
    assert channel.terminated
    assert sink.names()[-1] == "session.terminated"


@pytest.mark.asyncio
async def test_no_reply_to_ping_ends_session_before_greeting() -> None:
    channel = FakeChannel([])
    report = await run_session(channel, make_session_settings(), RecordingSink())

    assert report.phases == (SessionPhase.HANDSHAKE, SessionPhase.TERMINATED)
    assert report.aborted_in is SessionPhase.HANDSHAKE
    assert report.race is None
    assert channel.sent == [PingFrame(b"\x01\x02\x03")]
    assert not channel.is_split


@pytest.mark.asyncio
async def test_failed_ping_sends_nothing_else() -> None:
    channel = FakeChannel([PongFrame()], fail_sends_after=0)
    report = await run_session(channel, make_session_settings(), RecordingSink())

    assert report.aborted_in is SessionPhase.HANDSHAKE
    assert channel.sent == []


@pytest.mark.asyncio
async def test_close_during_handshake_skips_greeting() -> None:
    channel = FakeChannel([CloseFrame(CloseReason(1001, "leaving"))])
    report = await run_session(channel, make_session_settings(), RecordingSink())

    assert report.aborted_in is SessionPhase.HANDSHAKE
    assert channel.sent_texts == []


@pytest.mark.asyncio
async def test_greeting_failure_never_enters_duplex() -> None:
    # ping + two greetings go out, the third greeting fails
    channel = FakeChannel([PongFrame()], fail_sends_after=3)
    report = await run_session(channel, make_session_settings(), RecordingSink())

    assert report.phases == (SessionPhase.HANDSHAKE, SessionPhase.GREETING, SessionPhase.TERMINATED)
    assert report.aborted_in is SessionPhase.GREETING
    assert not report.reached_duplex
    assert channel.sent_texts == ["Hi 1 times!", "Hi 2 times!"]
    assert not channel.is_split


@pytest.mark.asyncio
async def test_close_right_after_greeting_cancels_sender() -> None:
    channel = FakeChannel([PongFrame(), CloseFrame(CloseReason(1000, "bye"))])
    sink = RecordingSink()

    report = await run_session(channel, make_session_settings(), sink)

    assert report.phases == ALL_PHASES
    assert report.race is not None
    assert report.race.winner.unit == "receiver"
    assert report.race.winner.count == 1
    assert report.race.cancelled_unit == "sender"
    # nothing is echoed back and the goodbye is never reached
    assert not any(isinstance(f, CloseFrame) for f in channel.sent)
    assert len([t for t in channel.sent_texts if t.startswith("Server message")]) <= 1
    assert sink.of("duplex.received") == [{"count": 1}]
    assert sink.of("duplex.sent") == []


@pytest.mark.asyncio
async def test_no_frames_after_termination() -> None:
    channel = FakeChannel([])
    await run_session(channel, make_session_settings(), RecordingSink())

    with pytest.raises(SendError):
        await channel.send(TextFrame("late"))


@pytest.mark.asyncio
async def test_split_channel_refuses_whole_channel_use_after_session() -> None:
    channel = FakeChannel([PongFrame(), CloseFrame()])
    await run_session(channel, make_session_settings(), RecordingSink())

    assert channel.is_split
    with pytest.raises(ChannelSplitError):
        await channel.recv()


@pytest.mark.asyncio
async def test_cancelled_session_still_logs_termination() -> None:
    channel = FakeChannel([], hang_when_drained=True)
    sink = RecordingSink()

    task = asyncio.create_task(run_session(channel, make_session_settings(), sink))
    await sink.wait_for("handshake.ping_sent")
    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task

    assert channel.terminated
    (terminated,) = sink.of("session.terminated")
    assert terminated == {"aborted_in": "handshake", "phases": ["handshake", "terminated"]}
