"""
Rolling 24 hour ticker events.

The all-market stream (``!ticker@arr``) pushes a JSON array of tickers; the
per-symbol stream pushes a single object. Both decode into a DayTickerBatch.
"""

from collections.abc import Iterator
from datetime import datetime
from decimal import Decimal
from typing import Any

from pydantic import ConfigDict, Field, RootModel, model_validator

from src.binance_stream.model.types import BinanceEvent, from_millis


class DayTickerEntry(BinanceEvent):
    """Rolling window statistics for one symbol."""

    symbol: str = Field(alias="s")
    price_change: Decimal = Field(alias="p")
    price_change_percent: Decimal = Field(alias="P")
    weighted_average_price: Decimal = Field(alias="w")
    previous_close: Decimal = Field(alias="x")
    last_price: Decimal = Field(alias="c")
    last_quantity: Decimal = Field(alias="Q")
    best_bid: Decimal = Field(alias="b")
    best_bid_quantity: Decimal = Field(alias="B")
    best_ask: Decimal = Field(alias="a")
    best_ask_quantity: Decimal = Field(alias="A")
    open: Decimal = Field(alias="o")
    high: Decimal = Field(alias="h")
    low: Decimal = Field(alias="l")
    volume: Decimal = Field(alias="v")
    quote_volume: Decimal = Field(alias="q")
    open_time: int = Field(alias="O")
    close_time: int = Field(alias="C")
    first_trade_id: int = Field(alias="F")
    last_trade_id: int = Field(alias="L")
    trade_count: int = Field(alias="n")

    @property
    def open_datetime(self) -> datetime:
        """Get window open time as datetime."""
        return from_millis(self.open_time)

    @property
    def close_datetime(self) -> datetime:
        """Get window close time as datetime."""
        return from_millis(self.close_time)

    @property
    def spread(self) -> Decimal:
        """Get spread between best ask and best bid."""
        return self.best_ask - self.best_bid


class DayTickerBatch(RootModel[tuple[DayTickerEntry, ...]]):
    """Ordered sequence of ticker entries from one frame."""

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="before")
    @classmethod
    def ensure_array_structure(cls, data: Any) -> Any:
        """Ensure a single ticker object becomes a batch of one."""
        if isinstance(data, dict):
            return [data]
        return data

    def __len__(self) -> int:
        """Get the number of entries."""
        return len(self.root)

    def __getitem__(self, index: int) -> DayTickerEntry:
        """Get an entry by position."""
        return self.root[index]

    def __iter__(self) -> Iterator[DayTickerEntry]:  # type: ignore[override]
        """Iterate entries in frame order."""
        return iter(self.root)

    @property
    def symbols(self) -> list[str]:
        """Get symbols in frame order."""
        return [entry.symbol for entry in self.root]
