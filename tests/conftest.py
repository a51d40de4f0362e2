"""Test configuration hooks."""

import pytest

from getstream.core import config as config_module
from getstream.core.client import StreamClient
from getstream.core.config import RetryPolicyConfig, StreamConfig

BASE_URL = "https://stream.test"
API_KEY = "test-key"
API_SECRET = "test-secret"

STREAM_ENV_VARS = ("STREAM_API_KEY", "STREAM_API_SECRET", "STREAM_BASE_URL", "STREAM_TIMEOUT")


@pytest.fixture
def clean_env(monkeypatch):
    """Remove STREAM_* variables for the test and restore the original state afterwards."""
    for name in STREAM_ENV_VARS:
        # setenv first so monkeypatch restores the original state on teardown
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.setattr(config_module, "_DOTENV_LOADED", True)
    return monkeypatch


@pytest.fixture
def stream_config():
    """Provides a manual configuration with retries that do not sleep."""
    return StreamConfig.manual(
        API_KEY,
        API_SECRET,
        base_url=BASE_URL,
        retry=RetryPolicyConfig(backoff_seconds=0.0, jitter=0.0),
    )


@pytest.fixture
def client(stream_config):
    """Provides a StreamClient pointed at the test base URL."""
    with StreamClient(stream_config) as stream_client:
        yield stream_client
