"""
Handler registry keyed by handler family.

Follows the injectable registry pattern: the registry is a plain Pydantic
model holding at most one handler per family, so tests can build an isolated
instance and inspect it.
"""

import logging

from pydantic import BaseModel, Field

from src.binance_stream.enums import HandlerFamily
from src.binance_stream.protocols import (
    DayTickerHandler,
    KlineHandler,
    MarketHandler,
    UserStreamHandler,
)

logger = logging.getLogger(__name__)

FAMILY_PROTOCOLS: dict[HandlerFamily, type] = {
    HandlerFamily.USER_STREAM: UserStreamHandler,
    HandlerFamily.MARKET: MarketHandler,
    HandlerFamily.DAY_TICKER: DayTickerHandler,
    HandlerFamily.KLINE: KlineHandler,
}


class HandlerRegistry(BaseModel):
    """
    Registry with at most one handler per family.

    Registration replaces any previous handler for the same family.
    """

    handlers: dict[HandlerFamily, object] = Field(default_factory=dict, exclude=True)

    model_config = {"arbitrary_types_allowed": True}

    def register(self, family: HandlerFamily, handler: object) -> None:
        """
        Register a handler for a family, replacing any previous one.

        Args:
            family: Family the handler serves
            handler: Object implementing the family's protocol

        Raises:
            TypeError: If the handler does not satisfy the family's protocol

        """
        protocol = FAMILY_PROTOCOLS[family]
        if not isinstance(handler, protocol):
            raise TypeError(
                f"{type(handler).__name__} does not implement {protocol.__name__}"
            )

        if family in self.handlers:
            logger.debug(f"Replacing {family.value} handler")
        self.handlers[family] = handler

    def get(self, family: HandlerFamily) -> object | None:
        """
        Get the handler for a family.

        Returns:
            The registered handler or None

        """
        return self.handlers.get(family)

    def has(self, family: HandlerFamily) -> bool:
        """Check if a family has a handler."""
        return family in self.handlers

    def list_families(self) -> list[HandlerFamily]:
        """List families with a registered handler."""
        return [family for family in HandlerFamily if family in self.handlers]

    def clear(self) -> None:
        """Remove every handler (mainly for testing)."""
        self.handlers.clear()
