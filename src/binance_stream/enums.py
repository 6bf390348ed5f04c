"""
Enums for the Binance stream dispatcher.

This module defines the vocabulary shared by the classifier, the decoder and
the dispatcher: which kind of frame arrived, which handler family owns it,
and which lifecycle state the dispatcher is in.

"""

from __future__ import annotations

import enum

# =============================================================================
# FRAME CLASSIFICATION ENUMS
# =============================================================================


class FrameKind(str, enum.Enum):
    """
    Classification assigned to a raw stream frame.

    Each terminal kind maps to exactly one event variant. ENVELOPE is the
    multiplexed wrapper and is never delivered on its own.
    """

    ACCOUNT_UPDATE = "account_update"
    ORDER_TRADE = "order_trade"
    AGGREGATED_TRADE = "aggregated_trade"
    DAY_TICKER = "day_ticker"
    KLINE = "kline"
    PARTIAL_ORDER_BOOK = "partial_order_book"
    DEPTH_UPDATE = "depth_update"
    ENVELOPE = "envelope"
    UNKNOWN = "unknown"


class HandlerFamily(str, enum.Enum):
    """
    Handler families.

    A family groups event variants that are delivered to a single handler
    object implementing the family's capability set.
    """

    USER_STREAM = "user_stream"
    MARKET = "market"
    DAY_TICKER = "day_ticker"
    KLINE = "kline"


class DispatcherState(str, enum.Enum):
    """Lifecycle states of a dispatcher."""

    DISCONNECTED = "disconnected"  # No transport, registry may be mutated
    CONNECTED = "connected"  # Transport held, run() may be called
    RUNNING = "running"  # Consuming frames
    TERMINATED = "terminated"  # Transport closed or failed


# =============================================================================
# MARKET STRUCTURE ENUMS
# =============================================================================


class TradeSide(str, enum.Enum):
    """
    Standardized enum for trade sides.

    Represents the direction of an order or trade in a consistent format.
    """

    BUY = "buy"
    SELL = "sell"

    @classmethod
    def from_exchange(cls, side: str) -> TradeSide:
        """
        Convert exchange side format to standardized enum.

        Args:
            side: Exchange side string (e.g., "BUY", "SELL", "B", "S")

        Returns:
            Standardized TradeSide enum value

        """
        normalized = side.lower()
        if normalized in {"buy", "b", "bid"}:
            return cls.BUY
        elif normalized in {"sell", "s", "ask"}:
            return cls.SELL
        else:
            raise ValueError(f"Invalid trade side: {side}")
