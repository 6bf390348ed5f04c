"""
Frame source over a blocking WebSocket connection.

This module wraps the synchronous client of the ``websockets`` library
behind the narrow FrameSource interface the dispatcher consumes:
- Opening a connection maps every handshake failure to HandshakeError
- A clean close from the server maps to EndOfStream
- Any other read failure maps to TransportError
"""

import logging
from collections.abc import Callable
from typing import Protocol, runtime_checkable

from websockets.exceptions import ConnectionClosedOK, WebSocketException
from websockets.sync.client import ClientConnection, connect

from src.binance_stream.config import ConnectionConfig
from src.binance_stream.errors import EndOfStream, HandshakeError, TransportError

logger = logging.getLogger(__name__)


@runtime_checkable
class FrameSource(Protocol):
    """Lazy, possibly infinite sequence of text frames."""

    def read_text(self) -> str:
        """
        Block until the next frame arrives.

        Raises:
            EndOfStream: If the transport was closed cleanly
            TransportError: If reading failed

        """
        ...

    def close(self) -> None:
        """Release the transport."""
        ...


Connector = Callable[[str], FrameSource]


class WebSocketFrameSource:
    """FrameSource backed by a ``websockets`` client connection."""

    def __init__(self, connection: ClientConnection) -> None:
        """
        Initialize the frame source.

        Args:
            connection: An open client connection

        """
        self.connection = connection

    @classmethod
    def open(
        cls, url: str, connection: ConnectionConfig | None = None
    ) -> "WebSocketFrameSource":
        """
        Perform the opening handshake.

        Args:
            url: WebSocket URL to connect to
            connection: Transport settings

        Returns:
            A connected frame source

        Raises:
            HandshakeError: If the connection could not be established

        """
        settings = connection or ConnectionConfig()
        logger.info(f"Connecting to {url}")
        try:
            client = connect(
                url,
                open_timeout=settings.open_timeout,
                close_timeout=settings.close_timeout,
                max_size=settings.max_frame_size,
                ping_interval=settings.ping_interval,
            )
        except (WebSocketException, OSError) as e:
            logger.error(f"Handshake with {url} failed: {e}")
            raise HandshakeError(url, e) from e

        logger.info("WebSocket connection opened")
        return cls(client)

    def read_text(self) -> str:
        """Read the next frame, decoding binary frames as UTF-8."""
        try:
            message = self.connection.recv()
        except ConnectionClosedOK as e:
            logger.info(f"WebSocket connection closed: {e}")
            raise EndOfStream(str(e)) from e
        except (WebSocketException, OSError) as e:
            raise TransportError(e) from e

        if isinstance(message, bytes):
            try:
                return message.decode("utf-8")
            except UnicodeDecodeError as e:
                raise TransportError(e) from e
        return message

    def close(self) -> None:
        """Close the connection."""
        self.connection.close()


def websocket_connector(connection: ConnectionConfig | None = None) -> Connector:
    """
    Build the default connector.

    Args:
        connection: Transport settings shared by every connection

    Returns:
        Callable opening a WebSocketFrameSource for a URL

    """

    def _connect(url: str) -> FrameSource:
        return WebSocketFrameSource.open(url, connection)

    return _connect
