"""Stream event models."""

from src.binance_stream.model.kline import Kline, KlineEvent
from src.binance_stream.model.market import (
    AggregatedTrade,
    DepthOrderBookDelta,
    PartialOrderBook,
)
from src.binance_stream.model.ticker import DayTickerBatch, DayTickerEntry
from src.binance_stream.model.types import BinanceEvent, PriceLevel
from src.binance_stream.model.user import AccountUpdate, Balance, OrderTrade

__all__ = [
    "AccountUpdate",
    "AggregatedTrade",
    "Balance",
    "BinanceEvent",
    "DayTickerBatch",
    "DayTickerEntry",
    "DepthOrderBookDelta",
    "Kline",
    "KlineEvent",
    "OrderTrade",
    "PartialOrderBook",
    "PriceLevel",
]
