"""Shared client instances.

``getstream.client()``, ``getstream.env()`` and ``getstream.env_vars()``
return one client per configuration source for the whole process. The
registry holding them is explicit so tests (and long-running apps that
rotate credentials) can drop the cached clients with ``reset_clients()``.
"""

from __future__ import annotations

import threading
from collections.abc import Callable

from .core.client import StreamClient
from .core.config import StreamConfig
from .core.logger import get_logger

logger = get_logger("registry")

DOTENV = "dotenv"
SYSTEM_ENV = "system_env"


class ClientRegistry:
    """Registry for named shared ``StreamClient`` instances."""

    def __init__(self) -> None:
        self._clients: dict[str, StreamClient] = {}
        self._lock = threading.Lock()

    def get_or_create(self, name: str, factory: Callable[[], StreamClient]) -> StreamClient:
        """Return the client registered under ``name``, building it on first use.

        A factory that raises leaves nothing registered, so the next call
        tries again.
        """
        with self._lock:
            client = self._clients.get(name)
            if client is None or client.is_closed:
                client = factory()
                self._clients[name] = client
                logger.debug("Registered shared client %r", name)
            return client

    def get(self, name: str) -> StreamClient | None:
        return self._clients.get(name)

    def names(self) -> list[str]:
        return list(self._clients)

    def reset(self) -> None:
        """Close and forget every registered client."""
        with self._lock:
            for client in self._clients.values():
                client.close()
            self._clients.clear()


_registry = ClientRegistry()


def get_registry() -> ClientRegistry:
    return _registry


def client() -> StreamClient:
    """Shared client configured from ``.env`` and the environment."""
    return env()


def env() -> StreamClient:
    """Shared client configured from ``.env`` and the environment."""
    return _registry.get_or_create(DOTENV, lambda: StreamClient(StreamConfig.from_env()))


def env_vars() -> StreamClient:
    """Shared client configured from process environment variables only."""
    return _registry.get_or_create(
        SYSTEM_ENV, lambda: StreamClient(StreamConfig.from_system_env())
    )


def manual(
    api_key: str,
    api_secret: str,
    base_url: str | None = None,
    timeout: float | None = None,
) -> StreamClient:
    """New client from explicit values. Never cached and never reads the environment."""
    return StreamClient(
        StreamConfig.manual(api_key, api_secret, base_url=base_url, timeout=timeout)
    )


def reset_clients() -> None:
    """Drop all shared clients; the next ``env()``/``env_vars()`` call rebuilds them."""
    _registry.reset()
