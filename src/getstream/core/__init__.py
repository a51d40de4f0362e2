"""Core modules for the Stream SDK.

This package contains the transport and its supporting pieces:
- HTTP client with request signing and retry
- Configuration management
- Logging utilities
- Response envelope and result wrapper
- Multipart upload helpers
"""

from .auth import create_user_token, decode_token, sign_server_token
from .client import StreamClient
from .config import LoggingConfig, RetryPolicyConfig, StreamConfig
from .errors import APIError, ConfigurationError, StreamError
from .logger import get_logger, setup_logging
from .response import StreamResponse
from .result import StreamResult
from .uploads import detect_content_type

__all__ = [
    "APIError",
    "ConfigurationError",
    "LoggingConfig",
    "RetryPolicyConfig",
    "StreamClient",
    "StreamConfig",
    "StreamError",
    "StreamResponse",
    "StreamResult",
    "create_user_token",
    "decode_token",
    "detect_content_type",
    "get_logger",
    "setup_logging",
    "sign_server_token",
]
