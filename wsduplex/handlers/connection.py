"""Connection entry point: wire an upgraded websocket into a session."""

from __future__ import annotations

import logging
from typing import Any

from websockets.asyncio.server import ServerConnection

from wsduplex.state.runtime import RuntimeDeps
from wsduplex.state.outcome import SessionReport
from wsduplex.telemetry.bound_sink import BoundEventSink
from wsduplex.config.server import USER_AGENT_FALLBACK
from wsduplex.channel.websocket import WebSocketChannel

from .session import run_session

logger = logging.getLogger(__name__)


def format_peer(address: Any) -> str:
    """Render a socket address as ``host:port`` (``[host]:port`` for IPv6)."""
    if not isinstance(address, tuple) or len(address) < 2:
        return str(address) if address else "unknown"
    host, port = address[0], address[1]
    if ":" in str(host):
        return f"[{host}]:{port}"
    return f"{host}:{port}"


def get_user_agent(connection: ServerConnection) -> str:
    request = connection.request
    if request is None:
        return USER_AGENT_FALLBACK
    return (request.headers.get("User-Agent") or "").strip() or USER_AGENT_FALLBACK


async def handle_websocket_connection(connection: ServerConnection, runtime_deps: RuntimeDeps) -> SessionReport | None:
    peer = format_peer(connection.remote_address)
    sink = BoundEventSink(runtime_deps.sink, peer=peer)
    sink.log("connection.opened", {"user_agent": get_user_agent(connection)})

    channel = WebSocketChannel(connection)
    try:
        return await run_session(channel, runtime_deps.settings.session, sink, peer=peer)
    except Exception:
        # Failures stay inside the session; the server keeps accepting connections.
        logger.exception("session %s failed", peer)
        return None


__all__ = ["format_peer", "get_user_agent", "handle_websocket_connection"]
