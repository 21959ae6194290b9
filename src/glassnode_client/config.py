"""Client configuration."""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_BASE_URL = "https://api.glassnode.com/v1/"
DEFAULT_METRICS_PREFIX = "metrics"


@dataclass(slots=True, frozen=True)
class TransportConfig:
    """Transport-related settings."""

    timeout_connect_seconds: float = 5.0
    timeout_read_seconds: float = 60.0
    timeout_write_seconds: float = 60.0
    timeout_pool_seconds: float = 5.0

    def validate(self) -> None:
        for field_name in (
            "timeout_connect_seconds",
            "timeout_read_seconds",
            "timeout_write_seconds",
            "timeout_pool_seconds",
        ):
            if getattr(self, field_name) <= 0:
                raise ValueError(f"transport.{field_name} must be > 0")


@dataclass(slots=True, frozen=True)
class GlassnodeClientConfig:
    """Runtime configuration for Glassnode client."""

    api_key: str = field(default="", repr=False)
    base_url: str = DEFAULT_BASE_URL
    metrics_prefix: str = DEFAULT_METRICS_PREFIX
    user_agent: str = "glassnode-client/0.1.0"

    transport: TransportConfig = field(default_factory=TransportConfig)

    def validate(self) -> None:
        if not isinstance(self.api_key, str):
            raise ValueError("api_key must be str")
        if not self.base_url:
            raise ValueError("base_url must not be empty")
        if not self.metrics_prefix.strip("/"):
            raise ValueError("metrics_prefix must not be empty")
        self.transport.validate()


__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_METRICS_PREFIX",
    "TransportConfig",
    "GlassnodeClientConfig",
]
