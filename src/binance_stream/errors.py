"""
Error taxonomy for the stream dispatcher.

Fatal errors (BadEndpoint, HandshakeError, TransportError) are raised to the
caller. Non-fatal errors (DecodeError, UnknownFrame) are absorbed by the
dispatcher and handed to an optional observer.
"""

from src.binance_stream.enums import FrameKind


class StreamError(Exception):
    """Base class for all stream dispatcher errors."""


class BadEndpoint(StreamError):
    """A subscription URL could not be built or parsed."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"Bad endpoint {url!r}: {reason}")


class HandshakeError(StreamError):
    """The transport could not be established."""

    def __init__(self, url: str, underlying: BaseException) -> None:
        self.url = url
        self.underlying = underlying
        super().__init__(f"Error during handshake with {url}: {underlying}")


class TransportError(StreamError):
    """Reading from an established transport failed."""

    def __init__(self, underlying: BaseException) -> None:
        self.underlying = underlying
        super().__init__(f"Transport failure: {underlying}")


class EndOfStream(StreamError):
    """The transport was closed cleanly."""


class DecodeError(StreamError):
    """A classified frame could not be deserialized into its event."""

    def __init__(self, kind: FrameKind, underlying: BaseException) -> None:
        self.kind = kind
        self.underlying = underlying
        super().__init__(f"Failed to decode {kind.value} frame: {underlying}")


class UnknownFrame(StreamError):
    """A frame matched no discriminator token."""

    def __init__(self, frame: str) -> None:
        self.frame = frame
        super().__init__(f"Unrecognized frame: {frame[:100]}")


class InvalidStateError(StreamError):
    """An operation was called in a dispatcher state that does not allow it."""
