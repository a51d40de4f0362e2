"""JWT signing for Stream API requests.

Server-side calls authenticate with a short-lived HS256 token signed with the
API secret. A fresh token is produced for every request so that the ``iat``
claim is always current.
"""

from __future__ import annotations

import time
from typing import Any

from jose import JWTError, jwt

from .errors import APIError, ConfigurationError
from .logger import get_logger

logger = get_logger("auth")

ALGORITHM = "HS256"


def _require_secret(secret: str | None) -> str:
    if not secret:
        raise ConfigurationError("API secret is required to sign tokens")
    return secret


def sign_server_token(secret: str | None, issued_at: int | None = None) -> str:
    """Create the server-side token sent in the ``Authorization`` header.

    Args:
        secret: API secret used as the HMAC key.
        issued_at: Unix timestamp for the ``iat`` claim. Defaults to now.

    Returns:
        Compact JWT string.

    Raises:
        ConfigurationError: If the secret is empty.
    """
    key = _require_secret(secret)
    claims = {
        "iat": int(time.time()) if issued_at is None else issued_at,
        "server": True,
    }
    return jwt.encode(claims, key, algorithm=ALGORITHM)


def create_user_token(
    secret: str | None,
    user_id: str,
    expires_in: int | None = None,
    issued_at: int | None = None,
) -> str:
    """Create a client-side token for ``user_id``.

    Args:
        secret: API secret used as the HMAC key.
        user_id: User the token is issued for.
        expires_in: Lifetime in seconds; the token does not expire when None.
        issued_at: Unix timestamp for the ``iat`` claim. Defaults to now.

    Returns:
        Compact JWT string.

    Example:
        ```python
        token = create_user_token(config.api_secret, "john", expires_in=3600)
        ```
    """
    key = _require_secret(secret)
    if not user_id:
        raise ValueError("user_id is required")

    now = int(time.time()) if issued_at is None else issued_at
    claims: dict[str, Any] = {"user_id": user_id, "iat": now}
    if expires_in is not None:
        claims["exp"] = now + expires_in
    return jwt.encode(claims, key, algorithm=ALGORITHM)


def decode_token(secret: str | None, token: str) -> dict[str, Any]:
    """Verify ``token`` against ``secret`` and return its claims.

    Raises:
        APIError: If the signature or expiry check fails.
    """
    key = _require_secret(secret)
    try:
        return jwt.decode(token, key, algorithms=[ALGORITHM])
    except JWTError as exc:
        logger.warning("Token verification failed: %s", exc)
        raise APIError(f"Invalid token: {exc}") from exc
