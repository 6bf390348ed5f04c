"""WebSocket transport."""

from src.binance_stream.connection.transport import (
    Connector,
    FrameSource,
    WebSocketFrameSource,
    websocket_connector,
)

__all__ = [
    "Connector",
    "FrameSource",
    "WebSocketFrameSource",
    "websocket_connector",
]
