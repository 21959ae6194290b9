"""Public package exports for Glassnode metrics client."""

from .async_client import AsyncGlassnodeClient
from .client import GlassnodeClient
from .config import GlassnodeClientConfig
from .timeutils import yesterday_timestamp

__all__ = ["GlassnodeClient", "AsyncGlassnodeClient", "GlassnodeClientConfig", "yesterday_timestamp"]
