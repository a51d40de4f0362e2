"""Stream API client.

This module implements the transport every resource call goes through:
- Request signing (server JWT in the ``Authorization`` header)
- JSON and multipart request bodies
- Retry with exponential backoff on connection failures
- Classification of responses into ``StreamResponse`` or ``APIError``
"""

from __future__ import annotations

import json
import random
import time
from collections.abc import Mapping
from typing import Any

import httpx

from .._version import SDK_NAME, __version__
from ..models.base import StreamModel, to_json_value
from ..resources.chat import ChatClient
from ..resources.common import CommonClient
from ..resources.feed import Feed, FeedResource
from ..resources.feeds import FeedsClient
from ..resources.moderation import ModerationClient
from ..resources.video import VideoClient
from .auth import create_user_token, sign_server_token
from .config import StreamConfig
from .errors import APIError, StreamError
from .logger import get_logger
from .response import StreamResponse
from .result import StreamResult
from .uploads import build_multipart, is_multipart_request

logger = get_logger("client")

HTTP_METHODS = frozenset({"GET", "POST", "PUT", "PATCH", "DELETE"})


def _query_value(value: Any) -> Any:
    if isinstance(value, bool):
        return "true" if value else "false"
    return value


def _error_message(status_code: int, payload: Any) -> str:
    fallback = f"Request failed with status {status_code}"
    if isinstance(payload, dict):
        reason = payload.get("message") or payload.get("detail")
        return str(reason) if reason else fallback
    return fallback


class StreamClient:
    """Client for the Stream chat, feeds, moderation and video APIs.

    The client owns one configuration and one ``httpx.Client``. Resource
    groups (``common``, ``chat``, ``feeds``, ``moderation``, ``video``) are
    created on first access and reuse this client for every request.

    Example:
        ```python
        from getstream import StreamClient
        from getstream.models import AddActivityRequest

        with StreamClient(api_key="key", api_secret="secret") as client:
            resp = client.feeds.add_activity(
                AddActivityRequest(type="post", text="hi", user_id="john", feeds=["user:john"])
            )
            print(resp.activity.id)

            # Endpoints without a dedicated method
            client.make_request("GET", "/api/v2/chat/messages/msg-1")
        ```
    """

    def __init__(
        self,
        config: StreamConfig | None = None,
        *,
        api_key: str | None = None,
        api_secret: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
    ):
        """Initialize the client.

        Args:
            config: Configuration to use. Defaults to ``StreamConfig.from_env()``.
            api_key: Override for the API key.
            api_secret: Override for the API secret.
            base_url: Override for the API base URL.
            timeout: Override for the request timeout in seconds.

        Raises:
            ConfigurationError: If the API key or secret is missing
                or a configuration value is invalid.
        """
        base = config if config is not None else StreamConfig.from_env()
        self.config = base.with_overrides(
            api_key=api_key,
            api_secret=api_secret,
            base_url=base_url,
            timeout=timeout,
        )
        self.config.validate()

        self._http = httpx.Client(base_url=self.config.base_url, timeout=self.config.timeout)

        self._common: CommonClient | None = None
        self._chat: ChatClient | None = None
        self._feeds: FeedsClient | None = None
        self._moderation: ModerationClient | None = None
        self._video: VideoClient | None = None
        self._feed_resource: FeedResource | None = None

    def __enter__(self) -> StreamClient:
        """Context manager entry."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit."""
        self.close()

    def close(self) -> None:
        """Close the HTTP client."""
        self._http.close()

    @property
    def is_closed(self) -> bool:
        return self._http.is_closed

    @property
    def user_agent(self) -> str:
        return f"{SDK_NAME}-{__version__}"

    # =========================================================================
    # Resource groups
    # =========================================================================

    @property
    def common(self) -> CommonClient:
        if self._common is None:
            self._common = CommonClient(self)
        return self._common

    @property
    def chat(self) -> ChatClient:
        if self._chat is None:
            self._chat = ChatClient(self)
        return self._chat

    @property
    def feeds(self) -> FeedsClient:
        if self._feeds is None:
            self._feeds = FeedsClient(self)
        return self._feeds

    @property
    def moderation(self) -> ModerationClient:
        if self._moderation is None:
            self._moderation = ModerationClient(self)
        return self._moderation

    @property
    def video(self) -> VideoClient:
        if self._video is None:
            self._video = VideoClient(self)
        return self._video

    @property
    def feed_resource(self) -> FeedResource:
        if self._feed_resource is None:
            self._feed_resource = FeedResource(self)
        return self._feed_resource

    def feed(self, feed_group_id: str, feed_id: str) -> Feed:
        """Return a handle for a single feed, e.g. ``client.feed("user", "john")``."""
        return Feed(self, feed_group_id, feed_id)

    def create_token(self, user_id: str, expires_in: int | None = None) -> str:
        """Create a client-side token for ``user_id``."""
        return create_user_token(self.config.api_secret, user_id, expires_in=expires_in)

    # =========================================================================
    # Transport
    # =========================================================================

    def send(
        self,
        method: str,
        path: str,
        query_params: Mapping[str, Any] | None = None,
        body: Any = None,
    ) -> StreamResponse:
        """Send one request and classify the result.

        Args:
            method: HTTP method (GET, POST, PUT, PATCH, DELETE).
            path: Server-relative path without query string.
            query_params: Extra query parameters, appended after ``api_key``.
            body: A model, a mapping, or an upload request (sent as multipart).

        Returns:
            Response envelope for 2xx responses.

        Raises:
            APIError: On non-2xx responses, connection failures (after retries)
                or missing upload files.
            ValueError: If ``method`` is not supported.
        """
        verb = method.upper()
        if verb not in HTTP_METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}")

        params = self._build_query(query_params)

        if is_multipart_request(body):
            multipart = build_multipart(body)
            return self._dispatch(
                verb,
                path,
                params,
                json_body=False,
                retry=self.config.retry.retry_multipart,
                files=multipart.files,
                data=multipart.data,
            )

        return self._dispatch(
            verb,
            path,
            params,
            json_body=True,
            retry=True,
            content=self._serialize_body(body),
        )

    def make_request(
        self,
        method: str,
        path: str,
        query_params: Mapping[str, Any] | None = None,
        body: Any = None,
    ) -> StreamResponse:
        """Send a request to any endpoint. Same contract as :meth:`send`."""
        return self.send(method, path, query_params=query_params, body=body)

    def try_send(
        self,
        method: str,
        path: str,
        query_params: Mapping[str, Any] | None = None,
        body: Any = None,
    ) -> StreamResult:
        """Like :meth:`send`, but return a :class:`StreamResult` instead of raising."""
        try:
            return StreamResult.ok(self.send(method, path, query_params=query_params, body=body))
        except StreamError as exc:
            return StreamResult.fail(exc)

    def get(self, path: str, query_params: Mapping[str, Any] | None = None) -> StreamResponse:
        """Make a GET request."""
        return self.send("GET", path, query_params=query_params)

    def post(
        self,
        path: str,
        body: Any = None,
        query_params: Mapping[str, Any] | None = None,
    ) -> StreamResponse:
        """Make a POST request."""
        return self.send("POST", path, query_params=query_params, body=body)

    def put(
        self,
        path: str,
        body: Any = None,
        query_params: Mapping[str, Any] | None = None,
    ) -> StreamResponse:
        """Make a PUT request."""
        return self.send("PUT", path, query_params=query_params, body=body)

    def patch(
        self,
        path: str,
        body: Any = None,
        query_params: Mapping[str, Any] | None = None,
    ) -> StreamResponse:
        """Make a PATCH request."""
        return self.send("PATCH", path, query_params=query_params, body=body)

    def delete(
        self,
        path: str,
        query_params: Mapping[str, Any] | None = None,
        body: Any = None,
    ) -> StreamResponse:
        """Make a DELETE request."""
        return self.send("DELETE", path, query_params=query_params, body=body)

    # =========================================================================
    # Internals
    # =========================================================================

    def _build_query(self, query_params: Mapping[str, Any] | None) -> list[tuple[str, Any]]:
        params: list[tuple[str, Any]] = [("api_key", self.config.api_key)]
        for key, value in (query_params or {}).items():
            if value is None:
                continue
            params.append((key, _query_value(value)))
        return params

    def _headers(self, json_body: bool) -> dict[str, str]:
        headers = {
            "Authorization": sign_server_token(self.config.api_secret),
            "stream-auth-type": "jwt",
            "X-Stream-Client": self.user_agent,
        }
        if json_body:
            headers["Content-Type"] = "application/json"
        return headers

    @staticmethod
    def _serialize_body(body: Any) -> str:
        if body is None:
            return "{}"
        if isinstance(body, StreamModel):
            return body.to_json()
        if isinstance(body, StreamResponse):
            return body.to_json()
        return json.dumps(to_json_value(body))

    def _backoff(self, delay: float) -> float:
        policy = self.config.retry
        jittered = delay + random.uniform(0.0, policy.jitter * delay)
        return min(jittered, policy.max_backoff_seconds)

    def _dispatch(
        self,
        verb: str,
        path: str,
        params: list[tuple[str, Any]],
        *,
        json_body: bool,
        retry: bool,
        **request_kwargs: Any,
    ) -> StreamResponse:
        policy = self.config.retry
        max_attempts = policy.max_attempts if retry else 1
        delay = policy.backoff_seconds
        attempt = 0

        while True:
            attempt += 1
            logger.debug("%s %s (attempt %s/%s)", verb, path, attempt, max_attempts)
            try:
                response = self._http.request(
                    verb,
                    path,
                    params=params,
                    headers=self._headers(json_body),
                    **request_kwargs,
                )
            except httpx.TransportError as exc:
                description = str(exc) or type(exc).__name__
                if attempt >= max_attempts:
                    logger.error(
                        "%s %s failed after %s attempt(s): %s",
                        verb,
                        path,
                        attempt,
                        description,
                    )
                    raise APIError(f"Request failed: {description}") from exc

                sleep_for = self._backoff(delay)
                logger.warning(
                    "%s %s attempt %s/%s failed: %s. Retrying in %.2fs",
                    verb,
                    path,
                    attempt,
                    max_attempts,
                    description,
                    sleep_for,
                )
                time.sleep(sleep_for)
                delay *= policy.backoff_multiplier
                continue
            except httpx.RequestError as exc:
                raise APIError(f"Request failed: {str(exc) or type(exc).__name__}") from exc

            return self._handle_response(verb, path, response)

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return response.text

    def _handle_response(self, verb: str, path: str, response: httpx.Response) -> StreamResponse:
        payload = self._decode(response)
        status = response.status_code

        if 200 <= status < 300:
            logger.debug("%s %s -> %s", verb, path, status)
            return StreamResponse({} if payload is None else payload)

        message = _error_message(status, payload)
        logger.error("%s %s -> %s: %s", verb, path, status, message)
        raise APIError(message, status_code=status, body=payload)
