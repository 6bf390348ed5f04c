"""
User data stream events.

These models decode the account and order payloads pushed on a listen-key
stream. They are frozen; handlers receive them as read-only values.
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from src.binance_stream.enums import TradeSide
from src.binance_stream.model.types import BinanceEvent, from_millis


class Balance(BaseModel):
    """Balance of a single asset inside an account update."""

    asset: str = Field(alias="a")
    free: Decimal = Field(alias="f")
    locked: Decimal = Field(alias="l")

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    @property
    def total(self) -> Decimal:
        """Free plus locked amount."""
        return self.free + self.locked


class AccountUpdate(BinanceEvent):
    """Account snapshot pushed as an ``outboundAccountInfo`` event."""

    maker_commission: int = Field(alias="m")
    taker_commission: int = Field(alias="t")
    buyer_commission: int = Field(alias="b")
    seller_commission: int = Field(alias="s")
    can_trade: bool = Field(alias="T")
    can_withdraw: bool = Field(alias="W")
    can_deposit: bool = Field(alias="D")
    last_update_time: int | None = Field(default=None, alias="u")
    balances: tuple[Balance, ...] = Field(alias="B")

    def balance_of(self, asset: str) -> Balance | None:
        """Find the balance entry for an asset, if present."""
        for balance in self.balances:
            if balance.asset == asset:
                return balance
        return None


class OrderTrade(BinanceEvent):
    """
    Order lifecycle event pushed as an ``executionReport``.

    Fields added to the payload after the first API revision are optional so
    older and newer frames both decode.
    """

    symbol: str = Field(alias="s")
    client_order_id: str = Field(alias="c")
    side: str = Field(alias="S")
    order_type: str = Field(alias="o")
    time_in_force: str = Field(alias="f")
    quantity: Decimal = Field(alias="q")
    price: Decimal = Field(alias="p")
    stop_price: Decimal = Field(alias="P")
    iceberg_quantity: Decimal = Field(alias="F")
    order_list_id: int = Field(default=-1, alias="g")
    original_client_order_id: str = Field(alias="C")
    execution_type: str = Field(alias="x")
    order_status: str = Field(alias="X")
    reject_reason: str = Field(alias="r")
    order_id: int = Field(alias="i")
    last_executed_quantity: Decimal = Field(alias="l")
    cumulative_filled_quantity: Decimal = Field(alias="z")
    last_executed_price: Decimal = Field(alias="L")
    commission: Decimal = Field(alias="n")
    commission_asset: str | None = Field(default=None, alias="N")
    transaction_time: int = Field(alias="T")
    trade_id: int = Field(alias="t")
    is_working: bool = Field(default=False, alias="w")
    is_maker: bool = Field(alias="m")
    order_creation_time: int | None = Field(default=None, alias="O")
    cumulative_quote_quantity: Decimal | None = Field(default=None, alias="Z")
    last_quote_quantity: Decimal | None = Field(default=None, alias="Y")
    quote_order_quantity: Decimal | None = Field(default=None, alias="Q")

    @property
    def side_value(self) -> TradeSide:
        """Get the order side as enum value."""
        return TradeSide.from_exchange(self.side)

    @property
    def transaction_datetime(self) -> datetime:
        """Get transaction time as datetime."""
        return from_millis(self.transaction_time)

    @property
    def is_trade(self) -> bool:
        """Check if this report is a fill."""
        return self.execution_type == "TRADE"
