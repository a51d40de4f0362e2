"""Python SDK for the Stream chat, feeds, moderation and video APIs.

Features:
- Server-side request signing (JWT) and ``api_key`` handling
- Typed request models with JSON round-tripping
- Dynamic response envelopes (``resp.channel.id``)
- Retry with exponential backoff on connection failures
- Configuration from arguments, ``.env`` files or environment variables

Example:
    ```python
    import getstream
    from getstream.models import ChannelGetOrCreateRequest, ChannelInput

    # Explicit credentials
    client = getstream.manual(api_key="key", api_secret="secret")

    # Or shared client from STREAM_API_KEY / STREAM_API_SECRET
    client = getstream.env()

    resp = client.chat.get_or_create_channel(
        "messaging",
        "general",
        ChannelGetOrCreateRequest(data=ChannelInput(created_by_id="john")),
    )
    print(resp.channel.cid)
    ```
"""

from ._version import __version__
from .core import (
    APIError,
    ConfigurationError,
    LoggingConfig,
    RetryPolicyConfig,
    StreamClient,
    StreamConfig,
    StreamError,
    StreamResponse,
    StreamResult,
    get_logger,
    setup_logging,
)
from .registry import ClientRegistry, client, env, env_vars, manual, reset_clients

__all__ = [
    "__version__",
    "APIError",
    "ClientRegistry",
    "ConfigurationError",
    "LoggingConfig",
    "RetryPolicyConfig",
    "StreamClient",
    "StreamConfig",
    "StreamError",
    "StreamResponse",
    "StreamResult",
    "client",
    "env",
    "env_vars",
    "get_logger",
    "manual",
    "reset_clients",
    "setup_logging",
]
