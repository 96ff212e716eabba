from .sink import EventSink
from .bound_sink import BoundEventSink
from .logging_sink import LoggingEventSink

__all__ = ["BoundEventSink", "EventSink", "LoggingEventSink"]
