from .base import DuplexChannel
from .recv_half import RecvHalf
from .send_half import SendHalf
from .websocket import WebSocketChannel

__all__ = ["DuplexChannel", "RecvHalf", "SendHalf", "WebSocketChannel"]
