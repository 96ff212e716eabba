#!/usr/bin/env python3
"""Manual client for the duplex session server.

Connects to /ws, prints every message the server pushes, optionally sends a
few text messages of its own and can close early to exercise the
receiver-first shutdown path.
"""

from __future__ import annotations

import sys
import time
import asyncio
import logging
import argparse
import contextlib
from pathlib import Path

import websockets

if __package__ in {None, ""}:
    sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from wsduplex.config.server import WS_ENDPOINT_PATH, DEFAULT_SERVER_HOST, DEFAULT_SERVER_PORT  # noqa: E402


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Drive one duplex session against a running server")
    p.add_argument("--server", default=f"{DEFAULT_SERVER_HOST}:{DEFAULT_SERVER_PORT}", help="host:port")
    p.add_argument("--send", action="append", default=[], help="text message to send once duplex mode starts")
    p.add_argument("--send-interval", type=float, default=0.5, help="seconds between client messages")
    p.add_argument("--close-after", type=float, default=None, help="close the session after N seconds")
    p.add_argument("--debug", action="store_true")
    return p.parse_args()


async def _recv_printer(ws, t0: float) -> int:
    count = 0
    async for message in ws:
        count += 1
        elapsed = time.perf_counter() - t0
        if isinstance(message, bytes):
            print(f"[{elapsed:6.2f}s] <<< {len(message)} bytes: {message!r}")
        else:
            print(f"[{elapsed:6.2f}s] <<< {message}")
    return count


async def _send_loop(ws, messages: list[str], interval_s: float) -> None:
    for text in messages:
        await asyncio.sleep(interval_s)
        await ws.send(text)
        print(f">>> {text}")


async def run(args: argparse.Namespace) -> int:
    server = args.server.strip().rstrip("/")
    ws_url = server if server.startswith(("ws://", "wss://")) else f"ws://{server}{WS_ENDPOINT_PATH}"
    print(f"ws: {ws_url}")

    t0 = time.perf_counter()
    async with websockets.connect(ws_url) as ws:
        printer = asyncio.create_task(_recv_printer(ws, t0))
        sender = asyncio.create_task(_send_loop(ws, args.send, args.send_interval))
        try:
            if args.close_after is not None:
                await asyncio.sleep(args.close_after)
                await ws.close(code=1000, reason="client done")
            received = await printer
        finally:
            sender.cancel()
            with contextlib.suppress(asyncio.CancelledError, websockets.exceptions.ConnectionClosed):
                await sender

    print(f"received {received} messages; close code={ws.close_code} reason={ws.close_reason!r}")
    return 0


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING, format="%(levelname)s: %(message)s")
    raise SystemExit(asyncio.run(run(args)))


if __name__ == "__main__":
    main()
