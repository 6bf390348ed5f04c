#!/usr/bin/env python3
"""Print Binance stream events to the console.

Usage: python run_stream.py bnbusdt@aggTrade bnbusdt@kline_1m ...
"""

import logging
import sys

from rich.console import Console

from src.binance_stream.config import config
from src.binance_stream.errors import StreamError
from src.binance_stream.model import (
    AggregatedTrade,
    DayTickerBatch,
    DepthOrderBookDelta,
    KlineEvent,
    PartialOrderBook,
)
from src.binance_stream.service import open_event_stream

console = Console()


class ConsoleMarketHandler:
    """Prints trades and order book events."""

    def on_aggregated_trade(self, event: AggregatedTrade) -> None:
        side = "[green]BUY[/]" if event.aggressor_side.value == "buy" else "[red]SELL[/]"
        console.print(f"{event.symbol} {side} {event.quantity} @ {event.price}")

    def on_depth_update(self, event: DepthOrderBookDelta) -> None:
        console.print(
            f"{event.symbol} depth {event.first_update_id}-{event.final_update_id}: "
            f"{len(event.bids)} bids, {len(event.asks)} asks"
        )

    def on_partial_order_book(self, event: PartialOrderBook) -> None:
        console.print(
            f"book #{event.last_update_id} bid {event.best_bid} ask {event.best_ask}"
        )


class ConsoleTickerHandler:
    """Prints 24 hour ticker batches."""

    def on_day_ticker_batch(self, batch: DayTickerBatch) -> None:
        for entry in batch:
            console.print(
                f"{entry.symbol} {entry.last_price} ({entry.price_change_percent}%)"
            )


class ConsoleKlineHandler:
    """Prints kline updates."""

    def on_kline(self, event: KlineEvent) -> None:
        bar = event.kline
        color = "green" if bar.is_bullish else "red"
        closed = " closed" if bar.is_closed else ""
        console.print(
            f"{bar.symbol} {bar.interval} [{color}]O {bar.open} H {bar.high} "
            f"L {bar.low} C {bar.close}[/]{closed}"
        )


def report(error: StreamError) -> None:
    console.print(f"[yellow]dropped:[/] {error}")


if __name__ == "__main__":
    logging.basicConfig(level=config.log_level)

    streams = sys.argv[1:] or ["bnbusdt@aggTrade", "bnbusdt@kline_1m"]
    console.print(f"Subscribing to {', '.join(streams)} (Ctrl+C to quit)")

    dispatcher = open_event_stream(
        streams,
        market_handler=ConsoleMarketHandler(),
        day_ticker_handler=ConsoleTickerHandler(),
        kline_handler=ConsoleKlineHandler(),
        config=config,
        on_error=report if config.debug else None,
    )
    try:
        dispatcher.run()
    except KeyboardInterrupt:
        dispatcher.close()
