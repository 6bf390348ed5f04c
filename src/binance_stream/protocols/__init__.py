"""Handler protocols."""

from src.binance_stream.protocols.handlers import (
    DayTickerHandler,
    KlineHandler,
    MarketHandler,
    UserStreamHandler,
)

__all__ = [
    "DayTickerHandler",
    "KlineHandler",
    "MarketHandler",
    "UserStreamHandler",
]
