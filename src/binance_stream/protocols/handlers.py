"""
Handler Protocol Layer for the Stream Dispatcher.

This module defines the capability sets that user-supplied handlers must
fulfil. Each protocol bundles every event variant of one handler family
behind a single object, so the dispatcher needs exactly one registration per
family.

Key design principles:
- Structural typing: handlers satisfy a protocol by shape, not inheritance
- Synchronous delivery: every method runs on the dispatcher's thread
- Read-only events: handlers receive frozen models and must not expect to
  mutate them
- No back-references: handlers are not given the dispatcher
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from src.binance_stream.model import (
    AccountUpdate,
    AggregatedTrade,
    DayTickerBatch,
    DepthOrderBookDelta,
    KlineEvent,
    OrderTrade,
    PartialOrderBook,
)

# =============================================================================
# USER DATA PROTOCOLS
# =============================================================================


@runtime_checkable
class UserStreamHandler(Protocol):
    """
    Protocol for user data stream handlers.

    Semantic Role: Account and order state observer
    Relationships:
    - Family: USER_STREAM
    - Receives: AccountUpdate, OrderTrade
    """

    def on_account_update(self, event: AccountUpdate) -> None:
        """
        Handle an account snapshot.

        Semantic Role: Balance and permission change notification
        Relationships:
        - Trigger: ``outboundAccountInfo`` frames

        Args:
            event: Decoded account update

        """
        ...

    def on_order_trade(self, event: OrderTrade) -> None:
        """
        Handle an order execution report.

        Semantic Role: Order lifecycle notification
        Relationships:
        - Trigger: ``executionReport`` frames
        - Covers: New, canceled, rejected, trade and expired reports

        Args:
            event: Decoded execution report

        """
        ...


# =============================================================================
# MARKET DATA PROTOCOLS
# =============================================================================


@runtime_checkable
class MarketHandler(Protocol):
    """
    Protocol for market data handlers.

    Semantic Role: Trade and order book observer
    Relationships:
    - Family: MARKET
    - Receives: AggregatedTrade, DepthOrderBookDelta, PartialOrderBook
    """

    def on_aggregated_trade(self, event: AggregatedTrade) -> None:
        """
        Handle an aggregated trade.

        Args:
            event: Decoded aggregated trade

        """
        ...

    def on_depth_update(self, event: DepthOrderBookDelta) -> None:
        """
        Handle an order book delta.

        Semantic Role: Incremental book change
        Relationships:
        - Ordering: Deltas arrive in update id order on one connection
        - Stateless: The dispatcher does not apply deltas to a local book

        Args:
            event: Decoded depth update

        """
        ...

    def on_partial_order_book(self, event: PartialOrderBook) -> None:
        """
        Handle a partial order book snapshot.

        Args:
            event: Decoded top of book snapshot

        """
        ...


@runtime_checkable
class DayTickerHandler(Protocol):
    """
    Protocol for rolling 24 hour ticker handlers.

    Semantic Role: Market summary observer
    Relationships:
    - Family: DAY_TICKER
    - Receives: DayTickerBatch (one or more entries per frame)
    """

    def on_day_ticker_batch(self, batch: DayTickerBatch) -> None:
        """
        Handle a batch of ticker entries.

        Args:
            batch: Entries in the order they appeared in the frame

        """
        ...


@runtime_checkable
class KlineHandler(Protocol):
    """
    Protocol for candlestick handlers.

    Semantic Role: Bar update observer
    Relationships:
    - Family: KLINE
    - Receives: KlineEvent (open and closed bars alike)
    """

    def on_kline(self, event: KlineEvent) -> None:
        """
        Handle a kline update.

        Args:
            event: Decoded kline event; ``event.kline.is_closed`` marks the
                final update of a bar

        """
        ...
