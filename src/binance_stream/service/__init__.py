"""Event streaming service."""

from src.binance_stream.service.event_stream import open_event_stream

__all__ = ["open_event_stream"]
