"""Binance stream dispatcher package."""

from src.binance_stream.dispatch import Dispatcher
from src.binance_stream.service import open_event_stream

__all__ = ["Dispatcher", "open_event_stream"]
