"""Frame classification, decoding and dispatch."""

from src.binance_stream.dispatch.classifier import classify, unwrap_envelope
from src.binance_stream.dispatch.decoder import decode
from src.binance_stream.dispatch.dispatcher import Dispatcher
from src.binance_stream.dispatch.registry import HandlerRegistry

__all__ = [
    "Dispatcher",
    "HandlerRegistry",
    "classify",
    "decode",
    "unwrap_envelope",
]
