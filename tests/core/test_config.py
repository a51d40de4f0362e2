"""Tests for configuration management.

Tests cover:
- RetryPolicyConfig defaults and validation
- LoggingConfig level normalisation
- StreamConfig validation order and immutability
- with_overrides semantics
- Construction from arguments, environment and .env files
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from getstream.core import config as config_module
from getstream.core.config import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
    LoggingConfig,
    RetryPolicyConfig,
    StreamConfig,
)
from getstream.core.errors import ConfigurationError

# ==============================================================================
# RetryPolicyConfig Tests
# ==============================================================================


class TestRetryPolicyConfig:
    """Tests for RetryPolicyConfig."""

    def test_default_values(self):
        config = RetryPolicyConfig()

        assert config.max_attempts == 3
        assert config.backoff_seconds == 0.05
        assert config.backoff_multiplier == 2.0
        assert config.jitter == 0.5
        assert config.max_backoff_seconds == 30.0
        assert config.retry_multipart is True

    def test_max_attempts_must_be_positive(self):
        with pytest.raises(ValidationError):
            RetryPolicyConfig(max_attempts=0)

    def test_jitter_bounds(self):
        with pytest.raises(ValidationError):
            RetryPolicyConfig(jitter=1.5)

    def test_is_frozen(self):
        config = RetryPolicyConfig()
        with pytest.raises(ValidationError):
            config.max_attempts = 10


# ==============================================================================
# LoggingConfig Tests
# ==============================================================================


class TestLoggingConfig:
    """Tests for LoggingConfig."""

    def test_default_values(self):
        config = LoggingConfig()

        assert config.level == "WARNING"
        assert config.log_file is None
        assert config.rich_console is True

    def test_level_is_upper_cased(self):
        assert LoggingConfig(level="debug").level == "DEBUG"

    def test_unknown_level_rejected(self):
        with pytest.raises(ValidationError, match="Unknown log level"):
            LoggingConfig(level="chatty")


# ==============================================================================
# StreamConfig Tests
# ==============================================================================


class TestStreamConfigValidation:
    """Tests for credential validation."""

    def test_valid_config_passes(self):
        config = StreamConfig.manual("key", "secret")

        config.validate()
        assert config.is_valid()

    @pytest.mark.parametrize("api_key", [None, ""])
    def test_missing_key_reported_first(self, api_key):
        config = StreamConfig(api_key=api_key, api_secret=None)

        with pytest.raises(ConfigurationError, match="API key is required"):
            config.validate()
        assert not config.is_valid()

    @pytest.mark.parametrize("api_secret", [None, ""])
    def test_missing_secret(self, api_secret):
        config = StreamConfig(api_key="key", api_secret=api_secret)

        with pytest.raises(ConfigurationError, match="API secret is required"):
            config.validate()

    def test_defaults(self):
        config = StreamConfig.manual("key", "secret")

        assert config.base_url == DEFAULT_BASE_URL
        assert config.timeout == DEFAULT_TIMEOUT
        assert config.retry == RetryPolicyConfig()

    def test_base_url_trailing_slash_stripped(self):
        config = StreamConfig.manual("key", "secret", base_url="https://example.com/")
        assert config.base_url == "https://example.com"

    def test_base_url_scheme_required(self):
        with pytest.raises(ConfigurationError, match="base_url must start with"):
            StreamConfig.manual("key", "secret", base_url="example.com")

    def test_timeout_must_be_positive(self):
        with pytest.raises(ConfigurationError, match="Invalid configuration"):
            StreamConfig.manual("key", "secret", timeout=0)

    def test_is_frozen(self):
        config = StreamConfig.manual("key", "secret")
        with pytest.raises(ValidationError):
            config.api_key = "other"

    def test_repr_masks_secret(self):
        config = StreamConfig.manual("key", "super-secret")

        assert "super-secret" not in repr(config)
        assert "'***'" in repr(config)


class TestWithOverrides:
    """Tests for StreamConfig.with_overrides."""

    def test_overrides_given_fields_only(self):
        original = StreamConfig.manual("key", "secret", base_url="https://a.example.com")
        updated = original.with_overrides(api_key="new-key", timeout=5)

        assert updated.api_key == "new-key"
        assert updated.timeout == 5
        assert updated.api_secret == "secret"
        assert updated.base_url == "https://a.example.com"

    def test_original_is_unchanged(self):
        original = StreamConfig.manual("key", "secret")
        original.with_overrides(api_key="new-key", base_url="https://b.example.com")

        assert original.api_key == "key"
        assert original.base_url == DEFAULT_BASE_URL

    def test_none_values_are_ignored(self):
        original = StreamConfig.manual("key", "secret", timeout=12)
        updated = original.with_overrides(api_key=None, timeout=None)

        assert updated == original
        assert updated is not original

    def test_overrides_are_validated(self):
        original = StreamConfig.manual("key", "secret")
        with pytest.raises(ConfigurationError, match="base_url must start with"):
            original.with_overrides(base_url="ftp://example.com")

    def test_negative_timeout_override(self):
        with pytest.raises(ConfigurationError, match="timeout"):
            StreamConfig.manual("key", "secret").with_overrides(timeout=-1)

    def test_unknown_field_rejected(self):
        with pytest.raises(TypeError, match="region"):
            StreamConfig.manual("key", "secret").with_overrides(region="eu")

    def test_to_dict(self):
        data = StreamConfig.manual("key", "secret").to_dict()

        assert data["api_key"] == "key"
        assert data["api_secret"] == "secret"
        assert data["base_url"] == DEFAULT_BASE_URL
        assert data["retry"]["max_attempts"] == 3


class TestEnvironmentLoading:
    """Tests for construction from the environment and .env files."""

    def test_from_system_env(self, clean_env):
        clean_env.setenv("STREAM_API_KEY", "env-key")
        clean_env.setenv("STREAM_API_SECRET", "env-secret")
        clean_env.setenv("STREAM_BASE_URL", "https://env.example.com")
        clean_env.setenv("STREAM_TIMEOUT", "7.5")

        config = StreamConfig.from_system_env()

        assert config.api_key == "env-key"
        assert config.api_secret == "env-secret"
        assert config.base_url == "https://env.example.com"
        assert config.timeout == 7.5

    def test_from_system_env_defaults(self, clean_env):
        config = StreamConfig.from_system_env()

        assert config.api_key is None
        assert config.base_url == DEFAULT_BASE_URL
        assert config.timeout == DEFAULT_TIMEOUT
        with pytest.raises(ConfigurationError, match="API key is required"):
            config.validate()

    def test_explicit_arguments_win(self, clean_env):
        clean_env.setenv("STREAM_API_KEY", "env-key")
        clean_env.setenv("STREAM_API_SECRET", "env-secret")

        config = StreamConfig.from_system_env(api_key="explicit-key")

        assert config.api_key == "explicit-key"
        assert config.api_secret == "env-secret"

    def test_invalid_timeout_in_environment(self, clean_env):
        clean_env.setenv("STREAM_API_KEY", "env-key")
        clean_env.setenv("STREAM_API_SECRET", "env-secret")
        clean_env.setenv("STREAM_TIMEOUT", "abc")

        with pytest.raises(ConfigurationError, match="Invalid configuration") as exc_info:
            StreamConfig.from_system_env()

        assert isinstance(exc_info.value.__cause__, ValidationError)

    def test_invalid_base_url_in_environment(self, clean_env):
        clean_env.setenv("STREAM_BASE_URL", "example.com")

        with pytest.raises(ConfigurationError, match="base_url must start with"):
            StreamConfig.from_env()

    def test_manual_ignores_environment(self, clean_env):
        clean_env.setenv("STREAM_BASE_URL", "https://env.example.com")
        clean_env.setenv("STREAM_TIMEOUT", "3")

        config = StreamConfig.manual("key", "secret")

        assert config.base_url == DEFAULT_BASE_URL
        assert config.timeout == DEFAULT_TIMEOUT

    def test_from_env_reads_dotenv(self, clean_env, tmp_path):
        (tmp_path / ".env").write_text(
            "STREAM_API_KEY=dotenv-key\nSTREAM_API_SECRET=dotenv-secret\n",
            encoding="utf-8",
        )
        clean_env.chdir(tmp_path)
        clean_env.setattr(config_module, "_DOTENV_LOADED", False)

        config = StreamConfig.from_env()

        assert config.api_key == "dotenv-key"
        assert config.api_secret == "dotenv-secret"
        assert config_module._DOTENV_LOADED is True
