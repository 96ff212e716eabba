"""Configuration module exports (env names, defaults and constants only)."""

from .server import WS_ENDPOINT_PATH
from .session import GREETING_TEMPLATE, MESSAGE_TEMPLATE

__all__ = [
    "GREETING_TEMPLATE",
    "MESSAGE_TEMPLATE",
    "WS_ENDPOINT_PATH",
]
