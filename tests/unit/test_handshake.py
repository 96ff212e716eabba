from __future__ import annotations

import pytest

from wsduplex.errors import ReceiveError
from wsduplex.handlers.handshake import run_handshake
from wsduplex.state.frames import PingFrame, PongFrame, TextFrame, CloseFrame, CloseReason
from tests.helpers.fakes import FakeChannel, RecordingSink, make_session_settings


@pytest.mark.asyncio
async def test_handshake_sends_one_ping_and_accepts_pong() -> None:
    channel = FakeChannel([PongFrame(b"\x01\x02\x03")])
    sink = RecordingSink()

    assert await run_handshake(channel, make_session_settings(), sink) is True
    assert channel.sent == [PingFrame(b"\x01\x02\x03")]
    assert channel.recv_calls == 1
    assert sink.names() == ["handshake.ping_sent", "frame.pong"]


@pytest.mark.asyncio
async def test_handshake_accepts_any_non_close_reply() -> None:
    channel = FakeChannel([TextFrame("hello from the client")])
    assert await run_handshake(channel, make_session_settings(), RecordingSink()) is True


@pytest.mark.asyncio
async def test_handshake_aborts_when_ping_cannot_be_sent() -> None:
    channel = FakeChannel([PongFrame()], fail_sends_after=0)
    sink = RecordingSink()

    assert await run_handshake(channel, make_session_settings(), sink) is False
    assert channel.recv_calls == 0
    assert sink.names() == ["handshake.ping_failed"]


@pytest.mark.asyncio
async def test_handshake_aborts_when_peer_is_gone() -> None:
    channel = FakeChannel([])
    sink = RecordingSink()

    assert await run_handshake(channel, make_session_settings(), sink) is False
    assert "handshake.no_reply" in sink.names()


@pytest.mark.asyncio
async def test_handshake_aborts_on_close_reply() -> None:
    channel = FakeChannel([CloseFrame(CloseReason(1000, "bye"))])
    sink = RecordingSink()

    assert await run_handshake(channel, make_session_settings(), sink) is False
    assert sink.of("frame.close") == [{"code": 1000, "reason": "bye"}]


@pytest.mark.asyncio
async def test_handshake_aborts_on_abrupt_disconnect() -> None:
    channel = FakeChannel([ReceiveError("reset by peer")])
    sink = RecordingSink()

    assert await run_handshake(channel, make_session_settings(), sink) is False
    (fields,) = sink.of("session.disconnected_abruptly")
    assert fields["phase"] == "handshake"
