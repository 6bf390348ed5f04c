"""
Subscription URL construction.

Binance serves two WebSocket entry points: a single-stream endpoint where
frames carry the raw payload, and a multiplexed endpoint where every frame is
wrapped in a ``{"stream": ..., "data": ...}`` envelope. The builder only
checks that the resulting URL parses; stream names are not validated.
"""

from collections.abc import Sequence

from websockets.exceptions import InvalidURI
from websockets.uri import parse_uri

from src.binance_stream.config import ConnectionConfig
from src.binance_stream.errors import BadEndpoint


class EndpointBuilder:
    """Composes subscription URLs from the configured bases."""

    def __init__(self, connection: ConnectionConfig | None = None) -> None:
        """
        Initialize the builder.

        Args:
            connection: Connection settings holding the base URLs

        """
        self.connection = connection or ConnectionConfig()

    def single(self, endpoint: str) -> str:
        """
        Build the URL for a single stream.

        Args:
            endpoint: Stream name appended as-is (e.g. "bnbusdt@kline_1m")

        Returns:
            The subscription URL

        Raises:
            BadEndpoint: If the resulting URL does not parse

        """
        return self._validated(f"{self.connection.ws_url}{endpoint}")

    def multi(self, endpoints: Sequence[str]) -> str:
        """
        Build the URL for the multiplexed endpoint.

        Frames received on this URL carry the envelope wrapper.

        Args:
            endpoints: Stream names, joined with "/"

        Returns:
            The subscription URL

        Raises:
            BadEndpoint: If no stream is given or the URL does not parse

        """
        url = f"{self.connection.multi_stream_url}{'/'.join(endpoints)}"
        if not endpoints:
            raise BadEndpoint(url, "no streams given")
        return self._validated(url)

    @staticmethod
    def _validated(url: str) -> str:
        try:
            parse_uri(url)
        except (InvalidURI, ValueError) as e:
            raise BadEndpoint(url, str(e)) from e
        return url


# Stream name helpers


def agg_trade_stream(symbol: str) -> str:
    """Aggregated trades for one symbol."""
    return f"{symbol.lower()}@aggTrade"


def kline_stream(symbol: str, interval: str) -> str:
    """Candlestick bars for one symbol at the given interval (e.g. "1m")."""
    return f"{symbol.lower()}@kline_{interval}"


def depth_stream(
    symbol: str, levels: int | None = None, update_speed_ms: int | None = None
) -> str:
    """
    Order book stream for one symbol.

    Without ``levels`` this is the diff stream (depthUpdate deltas). With
    ``levels`` (5, 10 or 20) it is the partial book stream (lastUpdateId
    snapshots).
    """
    name = f"{symbol.lower()}@depth{levels if levels is not None else ''}"
    if update_speed_ms is not None:
        name = f"{name}@{update_speed_ms}ms"
    return name


def ticker_stream(symbol: str) -> str:
    """Rolling 24 hour ticker for one symbol."""
    return f"{symbol.lower()}@ticker"


def all_tickers_stream() -> str:
    """Rolling 24 hour tickers for every symbol that changed."""
    return "!ticker@arr"
