"""Listening endpoint for the duplex session server."""

from __future__ import annotations

import asyncio
import logging
from http import HTTPStatus
from collections.abc import Callable, Awaitable

from websockets.http11 import Request, Response
from websockets.asyncio.server import Server, ServerConnection, serve

from wsduplex.state.runtime import RuntimeDeps
from wsduplex.runtime.logging import configure_logging
from wsduplex.state.settings import ServerSettings
from wsduplex.runtime.dependencies import build_runtime_deps
from wsduplex.handlers.connection import handle_websocket_connection

logger = logging.getLogger(__name__)

ProcessRequestFn = Callable[[ServerConnection, Request], Response | None]


def build_process_request(settings: ServerSettings) -> ProcessRequestFn:
    """Answer health probes and unknown paths before the websocket upgrade."""
    health_paths = frozenset(settings.health_paths)

    def process_request(connection: ServerConnection, request: Request) -> Response | None:
        path = request.path.split("?", 1)[0]
        if path == settings.ws_path:
            return None
        if path in health_paths:
            return connection.respond(HTTPStatus.OK, "ok\n")
        return connection.respond(HTTPStatus.NOT_FOUND, "not found\n")

    return process_request


def build_handler(runtime_deps: RuntimeDeps) -> Callable[[ServerConnection], Awaitable[None]]:
    async def handler(connection: ServerConnection) -> None:
        await handle_websocket_connection(connection, runtime_deps)

    return handler


def create_server(runtime_deps: RuntimeDeps) -> serve:
    """Return the (not yet started) server; use it with ``async with``."""
    settings = runtime_deps.settings.server
    return serve(
        build_handler(runtime_deps),
        settings.host,
        settings.port,
        process_request=build_process_request(settings),
    )


async def run_server(runtime_deps: RuntimeDeps) -> None:
    async with create_server(runtime_deps) as server:
        _log_listening(server)
        await server.serve_forever()


def _log_listening(server: Server) -> None:
    for sock in server.sockets:
        host, port = sock.getsockname()[:2]
        logger.info("Listening on %s:%s", host, port)


def main() -> None:
    configure_logging()
    runtime_deps = build_runtime_deps()
    try:
        asyncio.run(run_server(runtime_deps))
    except KeyboardInterrupt:
        logger.info("server: interrupted")


if __name__ == "__main__":
    main()
