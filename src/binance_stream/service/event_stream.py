"""
Simple event streaming service.

This module provides a one-call entry point for subscribing to Binance
streams: it builds a dispatcher, registers the given handlers and connects
to the right endpoint for the number of streams requested.
"""

from collections.abc import Callable, Sequence

from src.binance_stream.config import StreamConfig
from src.binance_stream.connection import Connector
from src.binance_stream.dispatch import Dispatcher
from src.binance_stream.errors import StreamError
from src.binance_stream.protocols import (
    DayTickerHandler,
    KlineHandler,
    MarketHandler,
    UserStreamHandler,
)


def open_event_stream(
    streams: Sequence[str],
    *,
    user_stream_handler: UserStreamHandler | None = None,
    market_handler: MarketHandler | None = None,
    day_ticker_handler: DayTickerHandler | None = None,
    kline_handler: KlineHandler | None = None,
    config: StreamConfig | None = None,
    connector: Connector | None = None,
    on_error: Callable[[StreamError], None] | None = None,
) -> Dispatcher:
    """
    Open a dispatcher subscribed to the given streams.

    One stream uses the single-stream endpoint; several use the multiplexed
    endpoint. The returned dispatcher is connected; call ``run()`` on it.

    Args:
        streams: Stream names (e.g. ["bnbusdt@aggTrade", "bnbusdt@kline_1m"])
        user_stream_handler: Handler for account and order events
        market_handler: Handler for trades and order book events
        day_ticker_handler: Handler for 24 hour ticker batches
        kline_handler: Handler for kline events
        config: Stream settings
        connector: Transport factory (WebSocket by default)
        on_error: Observer for dropped frames

    Returns:
        Connected Dispatcher

    Raises:
        ValueError: If no stream is given
        BadEndpoint: If the URL does not parse
        HandshakeError: If the transport could not be established

    """
    if not streams:
        raise ValueError("At least one stream is required")

    dispatcher = Dispatcher(config=config, connector=connector, on_error=on_error)

    if user_stream_handler is not None:
        dispatcher.set_user_stream_handler(user_stream_handler)
    if market_handler is not None:
        dispatcher.set_market_handler(market_handler)
    if day_ticker_handler is not None:
        dispatcher.set_day_ticker_handler(day_ticker_handler)
    if kline_handler is not None:
        dispatcher.set_kline_handler(kline_handler)

    match len(streams):
        case 1:
            dispatcher.connect(streams[0])
        case _:
            dispatcher.connect_multiple(streams)

    return dispatcher
