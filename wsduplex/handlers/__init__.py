from .session import run_session
from .classify import classify_frame
from .supervisor import supervise
from .connection import handle_websocket_connection

__all__ = ["classify_frame", "handle_websocket_connection", "run_session", "supervise"]
