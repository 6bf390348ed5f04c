"""Test helpers for stream dispatcher tests."""

import json
from collections.abc import Iterable
from typing import Any

from src.binance_stream.errors import EndOfStream, StreamError


def frame(payload: Any) -> str:
    """Serialize a payload the way the exchange sends it."""
    return json.dumps(payload, separators=(",", ":"))


def envelope(stream: str, payload: Any) -> str:
    """Wrap a payload as a multiplexed endpoint frame."""
    return frame({"stream": stream, "data": payload})


def account_update_payload() -> dict[str, Any]:
    """Account update with two balances."""
    return {
        "e": "outboundAccountInfo",
        "E": 1499405658849,
        "m": 0,
        "t": 0,
        "b": 0,
        "s": 0,
        "T": True,
        "W": True,
        "D": True,
        "u": 1499405658848,
        "B": [
            {"a": "LTC", "f": "17366.18538083", "l": "0.00000000"},
            {"a": "BTC", "f": "10537.85314051", "l": "2.19464093"},
        ],
    }


def order_trade_payload() -> dict[str, Any]:
    """Execution report for a new limit order."""
    return {
        "e": "executionReport",
        "E": 1499405658658,
        "s": "ETHBTC",
        "c": "mUvoqJxFIILMdfAW5iGSOW",
        "S": "BUY",
        "o": "LIMIT",
        "f": "GTC",
        "q": "1.00000000",
        "p": "0.10264410",
        "P": "0.00000000",
        "F": "0.00000000",
        "g": -1,
        "C": "",
        "x": "NEW",
        "X": "NEW",
        "r": "NONE",
        "i": 4293153,
        "l": "0.00000000",
        "z": "0.00000000",
        "L": "0.00000000",
        "n": "0",
        "N": None,
        "T": 1499405658657,
        "t": -1,
        "I": 8641984,
        "w": True,
        "m": False,
        "M": False,
        "O": 1499405658657,
        "Z": "0.00000000",
        "Y": "0.00000000",
        "Q": "0.00000000",
    }


def agg_trade_payload(aggregate_id: int = 42) -> dict[str, Any]:
    """Aggregated trade on BNBUSDT."""
    return {
        "e": "aggTrade",
        "E": 1,
        "s": "BNBUSDT",
        "a": aggregate_id,
        "p": "312.50000000",
        "q": "2.50000000",
        "f": 100,
        "l": 105,
        "T": 123456785,
        "m": True,
        "M": True,
    }


def depth_update_payload() -> dict[str, Any]:
    """Order book delta on BNBBTC."""
    return {
        "e": "depthUpdate",
        "E": 123456789,
        "s": "BNBBTC",
        "U": 157,
        "u": 160,
        "b": [["0.0024", "10"]],
        "a": [["0.0026", "100"]],
    }


def partial_book_payload() -> dict[str, Any]:
    """Top of book snapshot with legacy trailing placeholders."""
    return {
        "lastUpdateId": 160,
        "bids": [["0.0024", "10", []], ["0.0023", "5", []]],
        "asks": [["0.0026", "100", []]],
    }


def day_ticker_payload(symbol: str = "BNBBTC") -> dict[str, Any]:
    """Rolling 24 hour ticker entry."""
    return {
        "e": "24hrTicker",
        "E": 123456789,
        "s": symbol,
        "p": "0.0015",
        "P": "250.00",
        "w": "0.0018",
        "x": "0.0009",
        "c": "0.0025",
        "Q": "10",
        "b": "0.0024",
        "B": "10",
        "a": "0.0026",
        "A": "100",
        "o": "0.0010",
        "h": "0.0025",
        "l": "0.0010",
        "v": "10000",
        "q": "18",
        "O": 0,
        "C": 86400000,
        "F": 0,
        "L": 18150,
        "n": 18151,
    }


def kline_payload(closed: bool = False) -> dict[str, Any]:
    """One minute kline on BNBUSDT."""
    return {
        "e": "kline",
        "E": 123,
        "s": "BNBUSDT",
        "k": {
            "t": 123400000,
            "T": 123460000,
            "s": "BNBUSDT",
            "i": "1m",
            "f": 100,
            "L": 200,
            "o": "0.0010",
            "c": "0.0020",
            "h": "0.0025",
            "l": "0.0015",
            "v": "1000",
            "n": 100,
            "x": closed,
            "q": "1.0000",
            "V": "500",
            "Q": "0.500",
            "B": "123456",
        },
    }


class FakeFrameSource:
    """
    In-memory frame source for testing without network calls.

    Yields the given frames in order, then either signals end of stream or
    raises the configured error.
    """

    def __init__(
        self, frames: Iterable[str], error: StreamError | None = None
    ) -> None:
        """Initialize with frames and an optional terminal error."""
        self.frames = list(frames)
        self.error = error
        self.reads = 0
        self.closed = False

    def read_text(self) -> str:
        """Return the next frame."""
        if self.closed:
            raise EndOfStream("closed")
        if self.reads < len(self.frames):
            message = self.frames[self.reads]
            self.reads += 1
            return message
        if self.error is not None:
            raise self.error
        raise EndOfStream("no more frames")

    def close(self) -> None:
        """Mark the source closed."""
        self.closed = True


class FakeConnector:
    """Connector returning prepared frame sources and recording URLs."""

    def __init__(self, *sources: FakeFrameSource) -> None:
        """Initialize with the sources to hand out, in order."""
        self.sources = list(sources)
        self.urls: list[str] = []

    def __call__(self, url: str) -> FakeFrameSource:
        """Open the next prepared source."""
        self.urls.append(url)
        return self.sources.pop(0)


class RecordingHandler:
    """
    Handler implementing every family's protocol.

    Records ``(method, event)`` pairs in a shared call log so ordering across
    families can be asserted.
    """

    def __init__(self, calls: list[tuple[str, Any]] | None = None) -> None:
        """Initialize with an optional shared call log."""
        self.calls: list[tuple[str, Any]] = calls if calls is not None else []

    def on_account_update(self, event: Any) -> None:
        self.calls.append(("on_account_update", event))

    def on_order_trade(self, event: Any) -> None:
        self.calls.append(("on_order_trade", event))

    def on_aggregated_trade(self, event: Any) -> None:
        self.calls.append(("on_aggregated_trade", event))

    def on_depth_update(self, event: Any) -> None:
        self.calls.append(("on_depth_update", event))

    def on_partial_order_book(self, event: Any) -> None:
        self.calls.append(("on_partial_order_book", event))

    def on_day_ticker_batch(self, batch: Any) -> None:
        self.calls.append(("on_day_ticker_batch", batch))

    def on_kline(self, event: Any) -> None:
        self.calls.append(("on_kline", event))

    @property
    def methods(self) -> list[str]:
        """Get invoked method names in call order."""
        return [method for method, _ in self.calls]
