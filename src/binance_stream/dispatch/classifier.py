"""
Frame classification by discriminator token.

Binance embeds a family tag inside every payload, so a frame is classified by
scanning for fixed tokens instead of parsing it first. The token order is
part of the contract: when a frame contains several tokens the earliest entry
in DISCRIMINATORS wins. A depth delta that mentions ``lastUpdateId`` is
therefore a partial order book, and a kline envelope is a kline.
"""

import json

from src.binance_stream.enums import FrameKind
from src.binance_stream.errors import DecodeError

STREAM_TOKEN = "stream"
DATA_KEY = "data"

DISCRIMINATORS: tuple[tuple[str, FrameKind], ...] = (
    ("outboundAccountInfo", FrameKind.ACCOUNT_UPDATE),
    ("executionReport", FrameKind.ORDER_TRADE),
    ("aggTrade", FrameKind.AGGREGATED_TRADE),
    ("24hrTicker", FrameKind.DAY_TICKER),
    ("kline", FrameKind.KLINE),
    ("lastUpdateId", FrameKind.PARTIAL_ORDER_BOOK),
    ("depthUpdate", FrameKind.DEPTH_UPDATE),
    (STREAM_TOKEN, FrameKind.ENVELOPE),
)


def classify(frame: str) -> FrameKind:
    """
    Assign a frame to exactly one kind.

    Args:
        frame: Raw text frame

    Returns:
        The kind of the first discriminator found, or UNKNOWN

    """
    for token, kind in DISCRIMINATORS:
        if token in frame:
            return kind
    return FrameKind.UNKNOWN


def is_envelope(document: object) -> bool:
    """Check whether a parsed document is a multiplexed envelope."""
    return (
        isinstance(document, dict)
        and STREAM_TOKEN in document
        and DATA_KEY in document
    )


def unwrap_envelope(frame: str) -> str:
    """
    Extract the inner payload of a multiplexed frame.

    The envelope is parsed as JSON and the value of ``data`` is serialized
    back to compact text, so nested objects inside the payload cannot
    confuse the extraction.

    Args:
        frame: Raw ``{"stream": ..., "data": ...}`` frame

    Returns:
        The inner payload as a new frame

    Raises:
        DecodeError: If the frame is not valid JSON or has no data field

    """
    try:
        document = json.loads(frame)
    except json.JSONDecodeError as e:
        raise DecodeError(FrameKind.ENVELOPE, e) from e

    if not is_envelope(document):
        raise DecodeError(
            FrameKind.ENVELOPE, ValueError("Envelope has no stream/data fields")
        )

    return json.dumps(document[DATA_KEY], separators=(",", ":"))
