"""
Market data stream events.

Aggregated trades, order book deltas and partial order book snapshots. The
dispatcher delivers these values as decoded; no book state is kept between
frames.
"""

from datetime import datetime
from decimal import Decimal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from src.binance_stream.enums import TradeSide
from src.binance_stream.model.types import BinanceEvent, PriceLevel, from_millis


class AggregatedTrade(BinanceEvent):
    """Trades filled by a single taker order at one price, aggregated."""

    symbol: str = Field(alias="s")
    aggregate_trade_id: int = Field(alias="a")
    price: Decimal = Field(alias="p")
    quantity: Decimal = Field(alias="q")
    first_trade_id: int = Field(alias="f")
    last_trade_id: int = Field(alias="l")
    trade_time: int = Field(alias="T")
    is_buyer_maker: bool = Field(alias="m")

    @property
    def trade_datetime(self) -> datetime:
        """Get trade time as datetime."""
        return from_millis(self.trade_time)

    @property
    def aggressor_side(self) -> TradeSide:
        """
        Get the taker side.

        When the buyer is the maker, the seller crossed the spread.
        """
        return TradeSide.SELL if self.is_buyer_maker else TradeSide.BUY

    @property
    def value(self) -> Decimal:
        """Calculate trade value (price * quantity)."""
        return self.price * self.quantity


class DepthOrderBookDelta(BinanceEvent):
    """Incremental order book changes between two update ids."""

    symbol: str = Field(alias="s")
    first_update_id: int = Field(alias="U")
    final_update_id: int = Field(alias="u")
    bids: tuple[PriceLevel, ...] = Field(alias="b")
    asks: tuple[PriceLevel, ...] = Field(alias="a")


class PartialOrderBook(BaseModel):
    """
    Top of book snapshot from a partial depth stream.

    The payload is untagged: it is recognized by its ``lastUpdateId`` key.
    """

    last_update_id: int = Field(alias="lastUpdateId")
    bids: tuple[PriceLevel, ...] = Field(validation_alias=AliasChoices("bids", "b"))
    asks: tuple[PriceLevel, ...] = Field(validation_alias=AliasChoices("asks", "a"))

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    @property
    def best_bid(self) -> Decimal | None:
        """Get best bid price or None if no bids."""
        return max((level.price for level in self.bids), default=None)

    @property
    def best_ask(self) -> Decimal | None:
        """Get best ask price or None if no asks."""
        return min((level.price for level in self.asks), default=None)

    @property
    def spread(self) -> Decimal | None:
        """
        Get spread between best bid and ask.

        Calculated as best_ask - best_bid or None if either side is empty.
        """
        if self.best_bid is None or self.best_ask is None:
            return None
        return self.best_ask - self.best_bid
