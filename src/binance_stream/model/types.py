"""
Common types for stream event models.

This module provides shared building blocks so every event variant decodes
Binance's wire format the same way: single-letter aliases, millisecond
timestamps and string-encoded decimals.
"""

from datetime import UTC, datetime
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


def from_millis(value: int) -> datetime:
    """Convert an exchange millisecond timestamp to an aware UTC datetime."""
    return datetime.fromtimestamp(value / 1000, tz=UTC)


class BinanceEvent(BaseModel):
    """
    Base model for tagged stream events.

    Every payload except the partial order book carries an event type ("e")
    and an event time in milliseconds ("E").
    """

    event_type: str = Field(alias="e")
    event_time: int = Field(alias="E")

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    @property
    def timestamp(self) -> datetime:
        """Get event time as datetime."""
        return from_millis(self.event_time)


class PriceLevel(BaseModel):
    """
    A price level with price and quantity.

    On the wire a level is an array ``[price, quantity, ...]``; trailing
    elements are legacy placeholders and are ignored.
    """

    price: Decimal
    quantity: Decimal

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="before")
    @classmethod
    def from_wire_array(cls, data: Any) -> Any:
        """Accept the exchange's array encoding."""
        if isinstance(data, list | tuple):
            if len(data) < 2:
                raise ValueError(f"Price level needs price and quantity: {data}")
            return {"price": data[0], "quantity": data[1]}
        return data

    def to_tuple(self) -> tuple[Decimal, Decimal]:
        """Convert to tuple for compatibility."""
        return (self.price, self.quantity)
