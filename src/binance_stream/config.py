"""
Stream dispatcher configuration using Pydantic Settings.

This module provides configuration management for the stream dispatcher,
allowing environment-based configuration with type validation and defaults.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConnectionConfig(BaseSettings):
    """WebSocket connection configuration."""

    model_config = SettingsConfigDict(env_prefix="BINANCE_STREAM_CONNECTION_")

    # Endpoint bases
    ws_url: str = Field(
        default="wss://stream.binance.com:9443/ws/",
        description="Base URL for single-stream subscriptions",
    )
    multi_stream_url: str = Field(
        default="wss://stream.binance.com:9443/stream?streams=",
        description="Base URL for multiplexed subscriptions",
    )

    # Transport settings
    open_timeout: float = Field(
        default=10.0,
        gt=0.0,
        le=120.0,
        description="Handshake timeout in seconds",
    )
    close_timeout: float = Field(
        default=10.0,
        gt=0.0,
        le=120.0,
        description="Closing handshake timeout in seconds",
    )
    max_frame_size: int = Field(
        default=2**20,
        ge=1024,
        description="Maximum size of an incoming frame in bytes",
    )
    ping_interval: float | None = Field(
        default=20.0,
        description="Keepalive ping interval in seconds (None disables pings)",
    )


class StreamConfig(BaseSettings):
    """Root configuration combining all sub-configs."""

    model_config = SettingsConfigDict(env_prefix="BINANCE_STREAM_")

    connection: ConnectionConfig = Field(default_factory=ConnectionConfig)

    # Global settings
    debug: bool = False
    log_level: str = Field(
        default="INFO",
        pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
    )

    @classmethod
    def from_env(cls) -> "StreamConfig":
        """
        Load configuration from environment variables.

        Returns:
            Configured StreamConfig instance

        """
        return cls(connection=ConnectionConfig())


# Global config instance
config = StreamConfig.from_env()
