"""
Typed decoding of classified frames.

Each terminal FrameKind maps to one Pydantic model. Decoding either yields
the complete event or raises DecodeError; there is no partial result.
"""

import json

from pydantic import BaseModel, ValidationError

from src.binance_stream.dispatch.classifier import DATA_KEY, is_envelope
from src.binance_stream.enums import FrameKind
from src.binance_stream.errors import DecodeError
from src.binance_stream.model import (
    AccountUpdate,
    AggregatedTrade,
    DayTickerBatch,
    DepthOrderBookDelta,
    KlineEvent,
    OrderTrade,
    PartialOrderBook,
)

EVENT_MODELS: dict[FrameKind, type[BaseModel]] = {
    FrameKind.ACCOUNT_UPDATE: AccountUpdate,
    FrameKind.ORDER_TRADE: OrderTrade,
    FrameKind.AGGREGATED_TRADE: AggregatedTrade,
    FrameKind.DAY_TICKER: DayTickerBatch,
    FrameKind.KLINE: KlineEvent,
    FrameKind.PARTIAL_ORDER_BOOK: PartialOrderBook,
    FrameKind.DEPTH_UPDATE: DepthOrderBookDelta,
}


def decode(kind: FrameKind, frame: str) -> BaseModel:
    """
    Deserialize a frame into the event model for its kind.

    An envelope reaching the decoder (because its payload carried an earlier
    discriminator than ``stream``) is decoded from its ``data`` field, so
    multiplexed and single-stream frames produce identical events.

    Args:
        kind: Classification of the frame
        frame: Raw text frame

    Returns:
        The decoded event

    Raises:
        DecodeError: On invalid JSON, schema mismatch or a non-terminal kind

    """
    model = EVENT_MODELS.get(kind)
    if model is None:
        raise DecodeError(kind, ValueError(f"No event model for {kind.value}"))

    try:
        document = json.loads(frame)
        if is_envelope(document):
            document = document[DATA_KEY]
        return model.model_validate(document)
    except (json.JSONDecodeError, ValidationError) as e:
        raise DecodeError(kind, e) from e
