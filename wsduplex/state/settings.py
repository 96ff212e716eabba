"""Runtime settings (dataclasses only)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SessionSettings:
    ping_payload: bytes
    greeting_count: int
    greeting_interval_s: float
    greeting_template: str
    message_count: int
    message_interval_s: float
    message_template: str
    close_code: int
    close_reason: str


@dataclass(frozen=True, slots=True)
class ServerSettings:
    host: str
    port: int
    ws_path: str
    health_paths: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class AppSettings:
    server: ServerSettings
    session: SessionSettings


__all__ = ["AppSettings", "ServerSettings", "SessionSettings"]
