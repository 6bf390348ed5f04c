"""Test frame classification and envelope unwrapping."""

import json

import pytest

from src.binance_stream.dispatch.classifier import (
    DISCRIMINATORS,
    classify,
    unwrap_envelope,
)
from src.binance_stream.enums import FrameKind
from src.binance_stream.errors import DecodeError
from tests.unit.binance_stream.helpers import (
    agg_trade_payload,
    depth_update_payload,
    envelope,
    frame,
    kline_payload,
)


class TestClassify:
    """Test substring classification order."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ('{"e":"outboundAccountInfo"}', FrameKind.ACCOUNT_UPDATE),
            ('{"e":"executionReport"}', FrameKind.ORDER_TRADE),
            ('{"e":"aggTrade"}', FrameKind.AGGREGATED_TRADE),
            ('[{"e":"24hrTicker"}]', FrameKind.DAY_TICKER),
            ('{"e":"kline"}', FrameKind.KLINE),
            ('{"lastUpdateId":1}', FrameKind.PARTIAL_ORDER_BOOK),
            ('{"e":"depthUpdate"}', FrameKind.DEPTH_UPDATE),
            ('{"stream":"x","data":{}}', FrameKind.ENVELOPE),
            ('{"e":"bookTicker"}', FrameKind.UNKNOWN),
            ("", FrameKind.UNKNOWN),
        ],
    )
    def test_each_token_maps_to_its_kind(self, raw: str, expected: FrameKind) -> None:
        """Test that every discriminator token selects its kind."""
        assert classify(raw) == expected

    def test_earliest_token_wins_for_every_pair(self) -> None:
        """Test that a frame holding two tokens resolves to the earlier one."""
        # Given: Every ordered pair of discriminator tokens
        for i, (first_token, first_kind) in enumerate(DISCRIMINATORS):
            for later_token, _ in DISCRIMINATORS[i + 1 :]:
                # When: Both appear, later token placed first in the text
                raw = f'{{"{later_token}":1,"{first_token}":2}}'

                # Then: The earlier entry in the order still wins
                assert classify(raw) == first_kind, (first_token, later_token)

    def test_partial_book_beats_depth_update(self) -> None:
        """Test that a delta mentioning lastUpdateId is a partial book."""
        # Given: A depth delta that also carries the prior snapshot id
        payload = depth_update_payload()
        payload["lastUpdateId"] = 156

        # Then: lastUpdateId takes precedence
        assert classify(frame(payload)) == FrameKind.PARTIAL_ORDER_BOOK

    def test_kline_envelope_classifies_as_kline(self) -> None:
        """Test that an envelope with a tagged payload resolves to the payload tag."""
        raw = envelope("bnbusdt@kline_1m", kline_payload())

        assert classify(raw) == FrameKind.KLINE

    def test_classification_is_case_sensitive(self) -> None:
        """Test that tokens only match with their exact casing."""
        assert classify('{"e":"AGGTRADE"}') == FrameKind.UNKNOWN


class TestUnwrapEnvelope:
    """Test JSON-aware envelope extraction."""

    def test_extracts_inner_payload(self) -> None:
        """Test that the data field becomes the new frame."""
        # Given: An enveloped aggregated trade
        payload = agg_trade_payload()
        raw = envelope("bnbusdt@aggTrade", payload)

        # When: We unwrap it
        inner = unwrap_envelope(raw)

        # Then: The inner frame is exactly the payload
        assert json.loads(inner) == payload
        assert "stream" not in json.loads(inner)

    def test_nested_braces_survive_extraction(self) -> None:
        """Test that nested objects and trailing braces do not truncate data."""
        payload = {"outer": {"inner": {"deep": "}}"}}, "list": [{"x": 1}]}
        raw = envelope("weird", payload)

        assert json.loads(unwrap_envelope(raw)) == payload

    def test_array_payload(self) -> None:
        """Test that array payloads (all-market tickers) are extracted."""
        raw = envelope("!ticker@arr", [{"e": "24hrTicker"}, {"e": "24hrTicker"}])

        assert json.loads(unwrap_envelope(raw)) == [
            {"e": "24hrTicker"},
            {"e": "24hrTicker"},
        ]

    @pytest.mark.parametrize(
        "raw",
        [
            '{"stream": "x", "data": ',
            '{"stream": "x"}',
            '["stream"]',
        ],
    )
    def test_malformed_envelope_raises_decode_error(self, raw: str) -> None:
        """Test that broken envelopes are reported as decode errors."""
        with pytest.raises(DecodeError) as exc_info:
            unwrap_envelope(raw)

        assert exc_info.value.kind == FrameKind.ENVELOPE
