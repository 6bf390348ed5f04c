"""
Stream demultiplexer and event dispatcher.

The dispatcher drives classify -> decode -> deliver over a frame source:
- Frames are handled one at a time, in the order the source yields them
- Each frame reaches at most one handler, and only as a fully decoded event
- Malformed and unknown frames are dropped without stopping the loop
- Transport failures end the loop and are raised to the caller
"""

import logging
from collections.abc import Callable, Sequence
from typing import NamedTuple

from src.binance_stream.config import StreamConfig
from src.binance_stream.connection import Connector, FrameSource, websocket_connector
from src.binance_stream.dispatch.classifier import classify, unwrap_envelope
from src.binance_stream.dispatch.decoder import decode
from src.binance_stream.dispatch.registry import HandlerRegistry
from src.binance_stream.endpoints import EndpointBuilder
from src.binance_stream.enums import DispatcherState, FrameKind, HandlerFamily
from src.binance_stream.errors import (
    DecodeError,
    EndOfStream,
    InvalidStateError,
    StreamError,
    TransportError,
    UnknownFrame,
)
from src.binance_stream.protocols import (
    DayTickerHandler,
    KlineHandler,
    MarketHandler,
    UserStreamHandler,
)

logger = logging.getLogger(__name__)


class Route(NamedTuple):
    """Handler family and method that receive one kind of event."""

    family: HandlerFamily
    method: str


ROUTES: dict[FrameKind, Route] = {
    FrameKind.ACCOUNT_UPDATE: Route(HandlerFamily.USER_STREAM, "on_account_update"),
    FrameKind.ORDER_TRADE: Route(HandlerFamily.USER_STREAM, "on_order_trade"),
    FrameKind.AGGREGATED_TRADE: Route(HandlerFamily.MARKET, "on_aggregated_trade"),
    FrameKind.DEPTH_UPDATE: Route(HandlerFamily.MARKET, "on_depth_update"),
    FrameKind.PARTIAL_ORDER_BOOK: Route(HandlerFamily.MARKET, "on_partial_order_book"),
    FrameKind.DAY_TICKER: Route(HandlerFamily.DAY_TICKER, "on_day_ticker_batch"),
    FrameKind.KLINE: Route(HandlerFamily.KLINE, "on_kline"),
}


class Dispatcher:
    """
    Routes decoded stream events to the handler registered for their family.

    A dispatcher is driven by a single thread. Handlers are registered before
    run() and are invoked synchronously, never concurrently.
    """

    def __init__(
        self,
        config: StreamConfig | None = None,
        connector: Connector | None = None,
        on_error: Callable[[StreamError], None] | None = None,
    ) -> None:
        """
        Initialize a dispatcher with no handlers and no transport.

        Args:
            config: Stream settings (environment defaults when omitted)
            connector: Opens a frame source for a URL (WebSocket by default)
            on_error: Observer for dropped frames (DecodeError, UnknownFrame)

        """
        self.config = config or StreamConfig.from_env()
        self.endpoints = EndpointBuilder(self.config.connection)
        self.connector = connector or websocket_connector(self.config.connection)
        self.on_error = on_error
        self.registry = HandlerRegistry()
        self.url: str | None = None

        self._source: FrameSource | None = None
        self._state = DispatcherState.DISCONNECTED
        self._stop_requested = False

    @property
    def state(self) -> DispatcherState:
        """Get the current lifecycle state."""
        return self._state

    # Connection

    def connect(self, endpoint: str) -> None:
        """
        Connect to a single stream.

        Args:
            endpoint: Stream name (e.g. "bnbusdt@kline_1m")

        Raises:
            BadEndpoint: If the URL does not parse
            HandshakeError: If the transport could not be established

        """
        self._open(self.endpoints.single(endpoint))

    def connect_multiple(self, endpoints: Sequence[str]) -> None:
        """
        Connect to several streams over the multiplexed endpoint.

        Args:
            endpoints: Stream names

        Raises:
            BadEndpoint: If the URL does not parse
            HandshakeError: If the transport could not be established

        """
        self._open(self.endpoints.multi(endpoints))

    def _open(self, url: str) -> None:
        if self._state is DispatcherState.RUNNING:
            raise InvalidStateError("Cannot connect while running")

        source = self.connector(url)
        if self._source is not None:
            logger.info(f"Replacing connection to {self.url}")
            self._source.close()

        self._source = source
        self.url = url
        self._state = DispatcherState.CONNECTED
        logger.info(f"Connected to {url}")

    # Registration

    def set_user_stream_handler(self, handler: UserStreamHandler) -> None:
        """Replace the user data stream handler."""
        self._register(HandlerFamily.USER_STREAM, handler)

    def set_market_handler(self, handler: MarketHandler) -> None:
        """Replace the market data handler."""
        self._register(HandlerFamily.MARKET, handler)

    def set_day_ticker_handler(self, handler: DayTickerHandler) -> None:
        """Replace the 24 hour ticker handler."""
        self._register(HandlerFamily.DAY_TICKER, handler)

    def set_kline_handler(self, handler: KlineHandler) -> None:
        """Replace the kline handler."""
        self._register(HandlerFamily.KLINE, handler)

    def _register(self, family: HandlerFamily, handler: object) -> None:
        if self._state is DispatcherState.RUNNING:
            raise InvalidStateError("Handlers cannot change while running")
        self.registry.register(family, handler)

    # Event loop

    def run(self) -> None:
        """
        Consume frames until the stream ends, fails or stop() is called.

        Raises:
            InvalidStateError: If the dispatcher is not connected
            TransportError: If reading from the transport failed

        """
        if self._state is not DispatcherState.CONNECTED or self._source is None:
            raise InvalidStateError(f"Cannot run from state {self._state.value}")

        source = self._source
        self._state = DispatcherState.RUNNING
        self._stop_requested = False
        logger.info(f"Event loop started on {self.url}")

        try:
            while not self._stop_requested:
                try:
                    frame = source.read_text()
                except EndOfStream:
                    logger.info("Stream ended")
                    break
                except TransportError as e:
                    logger.error(f"Transport error: {e}")
                    raise
                self.handle_message(frame)
        finally:
            self._terminate()

        logger.info("Event loop stopped")

    def stop(self) -> None:
        """
        Ask the event loop to return before reading the next frame.

        A read already blocked on the transport is not interrupted; use
        close() to unblock it.
        """
        self._stop_requested = True

    def close(self) -> None:
        """Close the transport; a running loop ends on its next read."""
        if self._source is None:
            return
        if self._state is DispatcherState.RUNNING:
            self._stop_requested = True
            self._source.close()
        else:
            self._terminate()

    def _terminate(self) -> None:
        source, self._source = self._source, None
        self._state = DispatcherState.TERMINATED
        if source is not None:
            source.close()

    # Frame handling

    def handle_message(self, frame: str) -> None:
        """
        Classify, decode and deliver one frame.

        Non-fatal conditions are logged and reported to the observer;
        exceptions raised by handlers propagate.
        """
        kind = classify(frame)

        if kind is FrameKind.ENVELOPE:
            try:
                frame = unwrap_envelope(frame)
            except DecodeError as e:
                self._report(e)
                return
            kind = classify(frame)
            if kind is FrameKind.ENVELOPE:
                kind = FrameKind.UNKNOWN

        if kind is FrameKind.UNKNOWN:
            self._report(UnknownFrame(frame))
            return

        route = ROUTES[kind]
        handler = self.registry.get(route.family)
        if handler is None:
            logger.debug(f"No {route.family.value} handler, dropping {kind.value}")
            return

        try:
            event = decode(kind, frame)
        except DecodeError as e:
            self._report(e)
            return

        getattr(handler, route.method)(event)

    def _report(self, error: StreamError) -> None:
        if isinstance(error, DecodeError):
            logger.warning(f"Dropping frame: {error}")
        else:
            logger.debug(f"Dropping frame: {error}")

        if self.on_error is not None:
            self.on_error(error)
