"""Listening endpoint configuration."""

from __future__ import annotations

ENV_SERVER_HOST = "SERVER_HOST"
DEFAULT_SERVER_HOST = "127.0.0.1"
ENV_SERVER_PORT = "SERVER_PORT"
DEFAULT_SERVER_PORT = 3001

WS_ENDPOINT_PATH = "/ws"
HEALTH_PATHS = ("/", "/health", "/healthz")

USER_AGENT_FALLBACK = "Unknown browser"

__all__ = [
    "DEFAULT_SERVER_HOST",
    "DEFAULT_SERVER_PORT",
    "ENV_SERVER_HOST",
    "ENV_SERVER_PORT",
    "HEALTH_PATHS",
    "USER_AGENT_FALLBACK",
    "WS_ENDPOINT_PATH",
]
