"""Session script configuration: env names, defaults and message templates."""

from __future__ import annotations

# Initial liveness probe
ENV_SESSION_PING_PAYLOAD_HEX = "SESSION_PING_PAYLOAD_HEX"
DEFAULT_SESSION_PING_PAYLOAD_HEX = "010203"

# Control frames carry at most 125 payload bytes (RFC 6455 5.5)
MAX_CONTROL_PAYLOAD_BYTES = 125

# Scripted greeting phase
ENV_SESSION_GREETING_COUNT = "SESSION_GREETING_COUNT"
DEFAULT_SESSION_GREETING_COUNT = 5
ENV_SESSION_GREETING_INTERVAL_S = "SESSION_GREETING_INTERVAL_S"
DEFAULT_SESSION_GREETING_INTERVAL_S = 0.1
GREETING_TEMPLATE = "Hi {i} times!"

# Duplex sender unit
ENV_SESSION_MESSAGE_COUNT = "SESSION_MESSAGE_COUNT"
DEFAULT_SESSION_MESSAGE_COUNT = 20
ENV_SESSION_MESSAGE_INTERVAL_S = "SESSION_MESSAGE_INTERVAL_S"
DEFAULT_SESSION_MESSAGE_INTERVAL_S = 0.3
MESSAGE_TEMPLATE = "Server message {i}..."

# Graceful close issued by the sender unit
ENV_SESSION_CLOSE_CODE = "SESSION_CLOSE_CODE"
DEFAULT_SESSION_CLOSE_CODE = 1000
ENV_SESSION_CLOSE_REASON = "SESSION_CLOSE_REASON"
DEFAULT_SESSION_CLOSE_REASON = "Goodbye"

# Codes an endpoint may put on the wire (RFC 6455 7.4)
MIN_SENDABLE_CLOSE_CODE = 1000
MAX_SENDABLE_CLOSE_CODE = 4999
RESERVED_CLOSE_CODES = frozenset({1004, 1005, 1006, 1015})

__all__ = [
    "DEFAULT_SESSION_CLOSE_CODE",
    "DEFAULT_SESSION_CLOSE_REASON",
    "DEFAULT_SESSION_GREETING_COUNT",
    "DEFAULT_SESSION_GREETING_INTERVAL_S",
    "DEFAULT_SESSION_MESSAGE_COUNT",
    "DEFAULT_SESSION_MESSAGE_INTERVAL_S",
    "DEFAULT_SESSION_PING_PAYLOAD_HEX",
    "ENV_SESSION_CLOSE_CODE",
    "ENV_SESSION_CLOSE_REASON",
    "ENV_SESSION_GREETING_COUNT",
    "ENV_SESSION_GREETING_INTERVAL_S",
    "ENV_SESSION_MESSAGE_COUNT",
    "ENV_SESSION_MESSAGE_INTERVAL_S",
    "ENV_SESSION_PING_PAYLOAD_HEX",
    "GREETING_TEMPLATE",
    "MAX_CONTROL_PAYLOAD_BYTES",
    "MAX_SENDABLE_CLOSE_CODE",
    "MESSAGE_TEMPLATE",
    "MIN_SENDABLE_CLOSE_CODE",
    "RESERVED_CLOSE_CODES",
]
