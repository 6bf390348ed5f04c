"""Candlestick (kline) stream events."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from src.binance_stream.model.types import BinanceEvent, from_millis


class Kline(BaseModel):
    """A single candlestick bar, open or closed."""

    start_time: int = Field(alias="t")
    close_time: int = Field(alias="T")
    symbol: str = Field(alias="s")
    interval: str = Field(alias="i")
    first_trade_id: int = Field(alias="f")
    last_trade_id: int = Field(alias="L")
    open: Decimal = Field(alias="o")
    close: Decimal = Field(alias="c")
    high: Decimal = Field(alias="h")
    low: Decimal = Field(alias="l")
    volume: Decimal = Field(alias="v")
    trade_count: int = Field(alias="n")
    is_closed: bool = Field(alias="x")
    quote_volume: Decimal = Field(alias="q")
    taker_buy_base_volume: Decimal = Field(alias="V")
    taker_buy_quote_volume: Decimal = Field(alias="Q")

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    @property
    def start_datetime(self) -> datetime:
        """Get bar open time as datetime."""
        return from_millis(self.start_time)

    @property
    def close_datetime(self) -> datetime:
        """Get bar close time as datetime."""
        return from_millis(self.close_time)

    @property
    def is_bullish(self) -> bool:
        """Check if the bar closed above its open."""
        return self.close > self.open

    @property
    def range(self) -> Decimal:
        """High minus low."""
        return self.high - self.low


class KlineEvent(BinanceEvent):
    """Kline update for one symbol."""

    symbol: str = Field(alias="s")
    kline: Kline = Field(alias="k")
