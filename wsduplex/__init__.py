"""Per-connection duplex websocket session server."""

__all__: list[str] = []
