"""Environment parsing for runtime settings."""

from __future__ import annotations

import os

from wsduplex.state.settings import AppSettings, ServerSettings, SessionSettings
from wsduplex.config.server import (
    HEALTH_PATHS,
    ENV_SERVER_HOST,
    ENV_SERVER_PORT,
    WS_ENDPOINT_PATH,
    DEFAULT_SERVER_HOST,
    DEFAULT_SERVER_PORT,
)
from wsduplex.config.session import (
    MESSAGE_TEMPLATE,
    GREETING_TEMPLATE,
    RESERVED_CLOSE_CODES,
    ENV_SESSION_CLOSE_CODE,
    MAX_SENDABLE_CLOSE_CODE,
    MIN_SENDABLE_CLOSE_CODE,
    ENV_SESSION_CLOSE_REASON,
    MAX_CONTROL_PAYLOAD_BYTES,
    ENV_SESSION_MESSAGE_COUNT,
    DEFAULT_SESSION_CLOSE_CODE,
    ENV_SESSION_GREETING_COUNT,
    DEFAULT_SESSION_CLOSE_REASON,
    ENV_SESSION_PING_PAYLOAD_HEX,
    DEFAULT_SESSION_MESSAGE_COUNT,
    DEFAULT_SESSION_GREETING_COUNT,
    ENV_SESSION_MESSAGE_INTERVAL_S,
    ENV_SESSION_GREETING_INTERVAL_S,
    DEFAULT_SESSION_PING_PAYLOAD_HEX,
    DEFAULT_SESSION_MESSAGE_INTERVAL_S,
    DEFAULT_SESSION_GREETING_INTERVAL_S,
)

MAX_PORT = 65535
# Close reasons share the 125-byte control payload with the 2-byte code.
MAX_CLOSE_REASON_BYTES = MAX_CONTROL_PAYLOAD_BYTES - 2


def _str_env(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    v = raw.strip()
    return v if v else default


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _validate_non_negative(name: str, value: float) -> None:
    if value < 0:
        raise ValueError(f"{name} must be >= 0, got {value}")


def _validate_close_code(code: int) -> int:
    if code < MIN_SENDABLE_CLOSE_CODE or code > MAX_SENDABLE_CLOSE_CODE or code in RESERVED_CLOSE_CODES:
        raise ValueError(
            f"{ENV_SESSION_CLOSE_CODE} must be between {MIN_SENDABLE_CLOSE_CODE} and {MAX_SENDABLE_CLOSE_CODE}"
            f" and not one of {sorted(RESERVED_CLOSE_CODES)}, got {code}"
        )
    return code


def _validate_close_reason(reason: str) -> str:
    if len(reason.encode("utf-8")) > MAX_CLOSE_REASON_BYTES:
        raise ValueError(f"{ENV_SESSION_CLOSE_REASON} must encode to at most {MAX_CLOSE_REASON_BYTES} bytes")
    return reason


def _parse_ping_payload(raw: str) -> bytes:
    try:
        payload = bytes.fromhex(raw)
    except ValueError as exc:
        raise ValueError(f"{ENV_SESSION_PING_PAYLOAD_HEX} must be hex, got {raw!r}") from exc
    if len(payload) > MAX_CONTROL_PAYLOAD_BYTES:
        raise ValueError(f"{ENV_SESSION_PING_PAYLOAD_HEX} must decode to at most {MAX_CONTROL_PAYLOAD_BYTES} bytes")
    return payload


def _load_session_settings() -> SessionSettings:
    # The empty hex string is a valid (empty) ping payload, so read it raw.
    ping_hex = os.getenv(ENV_SESSION_PING_PAYLOAD_HEX)
    ping_payload = _parse_ping_payload(DEFAULT_SESSION_PING_PAYLOAD_HEX if ping_hex is None else ping_hex.strip())

    greeting_count = _int_env(ENV_SESSION_GREETING_COUNT, DEFAULT_SESSION_GREETING_COUNT)
    greeting_interval = _float_env(ENV_SESSION_GREETING_INTERVAL_S, DEFAULT_SESSION_GREETING_INTERVAL_S)
    message_count = _int_env(ENV_SESSION_MESSAGE_COUNT, DEFAULT_SESSION_MESSAGE_COUNT)
    message_interval = _float_env(ENV_SESSION_MESSAGE_INTERVAL_S, DEFAULT_SESSION_MESSAGE_INTERVAL_S)

    _validate_non_negative(ENV_SESSION_GREETING_COUNT, greeting_count)
    _validate_non_negative(ENV_SESSION_GREETING_INTERVAL_S, greeting_interval)
    _validate_non_negative(ENV_SESSION_MESSAGE_COUNT, message_count)
    _validate_non_negative(ENV_SESSION_MESSAGE_INTERVAL_S, message_interval)

    return SessionSettings(
        ping_payload=ping_payload,
        greeting_count=greeting_count,
        greeting_interval_s=greeting_interval,
        greeting_template=GREETING_TEMPLATE,
        message_count=message_count,
        message_interval_s=message_interval,
        message_template=MESSAGE_TEMPLATE,
        close_code=_validate_close_code(_int_env(ENV_SESSION_CLOSE_CODE, DEFAULT_SESSION_CLOSE_CODE)),
        close_reason=_validate_close_reason(_str_env(ENV_SESSION_CLOSE_REASON, DEFAULT_SESSION_CLOSE_REASON)),
    )


def _load_server_settings() -> ServerSettings:
    port = _int_env(ENV_SERVER_PORT, DEFAULT_SERVER_PORT)
    if port < 0 or port > MAX_PORT:
        raise ValueError(f"{ENV_SERVER_PORT} must be between 0 and {MAX_PORT}, got {port}")

    return ServerSettings(
        host=_str_env(ENV_SERVER_HOST, DEFAULT_SERVER_HOST),
        port=port,
        ws_path=WS_ENDPOINT_PATH,
        health_paths=HEALTH_PATHS,
    )


def load_settings() -> AppSettings:
    return AppSettings(
        server=_load_server_settings(),
        session=_load_session_settings(),
    )


__all__ = ["load_settings"]
