"""Configuration management for the Stream SDK.

This module provides configuration models and loading functionality using Pydantic
for validation and type safety. Values are resolved with the following precedence:

1. Explicit constructor arguments
2. Explicit overrides (``StreamConfig.with_overrides``)
3. Environment variables (``STREAM_API_KEY``, ``STREAM_API_SECRET``,
   ``STREAM_BASE_URL``, ``STREAM_TIMEOUT``), optionally loaded from ``.env``
4. Built-in defaults
"""

from __future__ import annotations

import logging
from typing import Any

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigurationError

DEFAULT_BASE_URL = "https://chat.stream-io-api.com"
DEFAULT_TIMEOUT = 30.0

_DOTENV_LOADED = False


def _load_env_once() -> None:
    """Load environment variables from a .env file exactly once."""

    global _DOTENV_LOADED
    if not _DOTENV_LOADED:
        load_dotenv(find_dotenv(usecwd=True))
        _DOTENV_LOADED = True


def _drop_none(values: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in values.items() if value is not None}


def _invalid(exc: ValidationError) -> ConfigurationError:
    return ConfigurationError(f"Invalid configuration: {exc}")


class RetryPolicyConfig(BaseModel):
    """Configuration for transport-level retry behaviour.

    Only connection failures are retried; HTTP error responses never are.
    """

    model_config = ConfigDict(frozen=True)

    max_attempts: int = Field(
        default=3,
        ge=1,
        description="Maximum number of attempts (including the first request)",
    )
    backoff_seconds: float = Field(
        default=0.05,
        ge=0.0,
        description="Initial delay in seconds before retrying",
    )
    backoff_multiplier: float = Field(
        default=2.0,
        ge=1.0,
        description="Multiplier applied to the backoff delay after each failure",
    )
    jitter: float = Field(
        default=0.5,
        ge=0.0,
        le=1.0,
        description="Randomness factor applied to each delay (0 disables jitter)",
    )
    max_backoff_seconds: float = Field(
        default=30.0,
        ge=0.0,
        description="Maximum delay cap between retries",
    )
    retry_multipart: bool = Field(
        default=True,
        description="Whether multipart file uploads are retried on connection failures",
    )


class LoggingConfig(BaseModel):
    """Configuration for SDK logging."""

    level: str = Field(default="WARNING", description="Log level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format for file (and plain console) output",
    )
    log_file: str | None = Field(default=None, description="Log file path")
    max_bytes: int = Field(default=10485760, description="Max log file size (10MB)")
    backup_count: int = Field(default=5, description="Number of backup files")
    rich_console: bool = Field(default=True, description="Use rich for console output")

    @field_validator("level")
    @classmethod
    def normalise_level(cls, value: str) -> str:
        level = (value or "WARNING").strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level


class StreamSettings(BaseSettings):
    """Raw values sourced from ``STREAM_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="STREAM_",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str | None = None
    api_secret: str | None = None
    base_url: str | None = None
    timeout: float | None = None


class StreamConfig(BaseModel):
    """Credentials and connection settings for a :class:`StreamClient`.

    Instances are immutable; use :meth:`with_overrides` to derive a new one.

    Example:
        ```python
        config = StreamConfig.manual(api_key="key", api_secret="secret")
        staging = config.with_overrides(base_url="https://staging.example.com")
        ```
    """

    model_config = ConfigDict(frozen=True)

    api_key: str | None = Field(default=None, description="Stream API key")
    api_secret: str | None = Field(default=None, description="Stream API secret")
    base_url: str = Field(default=DEFAULT_BASE_URL, description="API base URL")
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0.0, description="Request timeout")
    retry: RetryPolicyConfig = Field(
        default_factory=RetryPolicyConfig, description="Transport retry policy"
    )

    @field_validator("base_url")
    @classmethod
    def normalise_base_url(cls, value: str) -> str:
        url = (value or "").strip().rstrip("/")
        if not url:
            return DEFAULT_BASE_URL
        if not url.startswith(("http://", "https://")):
            raise ValueError("base_url must start with http:// or https://")
        return url

    def validate(self) -> None:  # type: ignore[override]
        """Ensure both credentials are present.

        Raises:
            ConfigurationError: Naming the first missing credential (key, then secret).
        """
        if not self.api_key:
            raise ConfigurationError("API key is required")
        if not self.api_secret:
            raise ConfigurationError("API secret is required")

    def is_valid(self) -> bool:
        return bool(self.api_key and self.api_secret)

    def with_overrides(self, **overrides: Any) -> StreamConfig:
        """Return a new configuration with the given fields replaced.

        Fields that are not passed, or passed as ``None``, keep this
        instance's values.

        Raises:
            TypeError: If an unknown field name is given.
            ConfigurationError: If a value fails validation.
        """
        unknown = set(overrides) - set(type(self).model_fields)
        if unknown:
            raise TypeError(f"Unknown configuration field(s): {', '.join(sorted(unknown))}")
        updates = _drop_none(overrides)
        if not updates:
            return self.model_copy()
        try:
            return type(self).model_validate({**self.model_dump(), **updates})
        except ValidationError as exc:
            raise _invalid(exc) from exc

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump()

    def __repr__(self) -> str:
        secret = "***" if self.api_secret else None
        return (
            f"StreamConfig(api_key={self.api_key!r}, api_secret={secret!r}, "
            f"base_url={self.base_url!r}, timeout={self.timeout!r})"
        )

    @classmethod
    def manual(
        cls,
        api_key: str,
        api_secret: str,
        base_url: str | None = None,
        timeout: float | None = None,
        retry: RetryPolicyConfig | None = None,
    ) -> StreamConfig:
        """Build a configuration from explicit values only (no environment lookup)."""
        values = {
            "api_key": api_key,
            "api_secret": api_secret,
            "base_url": base_url,
            "timeout": timeout,
            "retry": retry,
        }
        try:
            return cls(**_drop_none(values))
        except ValidationError as exc:
            raise _invalid(exc) from exc

    @classmethod
    def from_system_env(cls, **explicit: Any) -> StreamConfig:
        """Build a configuration from ``STREAM_*`` environment variables.

        Explicit keyword arguments take precedence over the environment.

        Raises:
            ConfigurationError: If an environment or explicit value is invalid.
        """
        try:
            env_values = _drop_none(StreamSettings().model_dump())
            return cls(**{**env_values, **_drop_none(explicit)})
        except ValidationError as exc:
            raise _invalid(exc) from exc

    @classmethod
    def from_env(cls, **explicit: Any) -> StreamConfig:
        """Like :meth:`from_system_env`, loading a ``.env`` file first if one exists."""
        _load_env_once()
        return cls.from_system_env(**explicit)
