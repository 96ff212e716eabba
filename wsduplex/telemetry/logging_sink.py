"""EventSink backed by the stdlib logging module."""

from __future__ import annotations

import logging
from typing import Any
from collections.abc import Mapping

import orjson

logger = logging.getLogger(__name__)

_WARNING_SUFFIXES = ("_failed", "_abruptly", ".no_reply")


def _encode_default(value: Any) -> Any:
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value).hex()
    return str(value)


def encode_fields(fields: Mapping[str, Any]) -> str:
    """Render event fields as a compact JSON object."""
    return orjson.dumps(dict(fields), default=_encode_default, option=orjson.OPT_SORT_KEYS).decode("utf-8")


class LoggingEventSink:
    def __init__(self, target: logging.Logger | None = None) -> None:
        self._logger = target or logger

    @staticmethod
    def level_for(event: str) -> int:
        return logging.WARNING if event.endswith(_WARNING_SUFFIXES) else logging.INFO

    def log(self, event: str, fields: Mapping[str, Any]) -> None:
        level = self.level_for(event)
        if not self._logger.isEnabledFor(level):
            return
        self._logger.log(level, "%s %s", event, encode_fields(fields))


__all__ = ["LoggingEventSink", "encode_fields"]
