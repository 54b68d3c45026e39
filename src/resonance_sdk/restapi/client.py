"""Resonance REST API client.

Provides an async HTTP client with bearer-token authentication, a
per-request deadline, structured error mapping and transparent unwrapping
of the ``{"data": ...}`` response envelope.
"""

import asyncio
import json
import time
from types import TracebackType
from typing import Any, NoReturn

import httpx
import pydantic
import structlog

from .errors import UNKNOWN_ERROR_CODE, RequestTimeoutError, ResonanceAPIError
from .types import APIErrorBody, QueryParams

logger = structlog.get_logger(__name__)

DEFAULT_TIMEOUT_MS = 30_000

# Linear backoff between GET attempts: RETRY_BACKOFF_SECONDS * attempt.
RETRY_BACKOFF_SECONDS = 1.0


def serialize_query(params: QueryParams | None) -> dict[str, str]:
    """Convert query parameters to strings, dropping ``None`` values.

    Booleans are rendered as ``"true"``/``"false"``.
    """
    if not params:
        return {}
    query = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            query[key] = "true" if value else "false"
        else:
            query[key] = str(value)
    return query


def unwrap_envelope(payload: Any) -> Any:
    """Return ``payload["data"]`` for enveloped bodies, else the body itself.

    A ``data`` key holding ``None`` unwraps to ``None``; only a body without
    the key is returned as it is.
    """
    if isinstance(payload, dict) and "data" in payload:
        return payload["data"]
    return payload


def raise_api_error(response: httpx.Response) -> NoReturn:
    """Raise :class:`ResonanceAPIError` for a non-2xx response.

    The error code and message are read from an
    ``{"error": {"code", "message"}}`` body when present. Any other body
    falls back to ``UNKNOWN_ERROR`` and ``"HTTP <status>: <reason>"``.

    Raises:
        ResonanceAPIError: Always.
    """
    code = UNKNOWN_ERROR_CODE
    message = f"HTTP {response.status_code}: {response.reason_phrase}"

    try:
        body = APIErrorBody.model_validate(response.json())
    except (ValueError, pydantic.ValidationError):
        body = None

    if body is not None:
        code = body.error.code
        if body.error.message is not None:
            message = body.error.message

    logger.warning(
        "API error response",
        status_code=response.status_code,
        error_code=code,
        error_message=message,
    )
    raise ResonanceAPIError(response.status_code, code, message)


class HTTPClient:
    """Async HTTP client for the Resonance REST API.

    Holds the base URL, the request deadline and a mutable mapping of
    default headers. Headers are read when each request starts, so later
    calls always see the latest values; a request already in flight keeps
    the headers it started with.

    Can be used as an async context manager for automatic cleanup.
    """

    def __init__(
        self,
        base_url: str,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        headers: dict[str, str] | None = None,
        max_get_attempts: int = 1,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the REST API client.

        Args:
            base_url: Base URL of the API (e.g., "https://api.resonance.network").
                One trailing slash is removed.
            timeout_ms: Deadline for each request in milliseconds (default: 30000).
            headers: Extra default headers sent with every request.
            max_get_attempts: Attempts for GET requests failing at the
                transport level (default: 1, no retry).
            transport: Optional httpx transport, e.g. ``httpx.MockTransport``.

        Raises:
            ValueError: If base_url is empty, or timeout_ms or
                max_get_attempts is not positive.
        """
        if not base_url:
            msg = "base_url cannot be empty"
            raise ValueError(msg)
        if timeout_ms <= 0:
            msg = "timeout_ms must be positive"
            raise ValueError(msg)
        if max_get_attempts < 1:
            msg = "max_get_attempts must be at least 1"
            raise ValueError(msg)

        self.base_url = base_url.removesuffix("/")
        self.timeout_ms = timeout_ms
        self.max_get_attempts = max_get_attempts
        self._transport = transport

        self._headers = {
            "Content-Type": "application/json",
            **(headers or {}),
        }

        self._client: httpx.AsyncClient | None = None

    @property
    def client(self) -> httpx.AsyncClient:
        """Get or create the underlying httpx client.

        The client is created lazily and recreated after it is closed.
        Headers are not bound to it; they are passed on each request.
        """
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=self.timeout_ms / 1000,
                transport=self._transport,
            )
        return self._client

    @property
    def headers(self) -> dict[str, str]:
        """A copy of the current default headers."""
        return dict(self._headers)

    async def __aenter__(self) -> "HTTPClient":
        """Enter async context manager."""
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Exit async context manager and cleanup resources."""
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client if open."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()

    def set_auth_token(self, token: str | None) -> None:
        """Set or clear the bearer token.

        A falsy token removes the Authorization header entirely.
        """
        if token:
            self._headers["Authorization"] = f"Bearer {token}"
        else:
            self._headers.pop("Authorization", None)

    def set_header(self, key: str, value: str) -> None:
        """Set a default header sent with all subsequent requests."""
        self._headers[key] = value

    def build_url(self, path: str, params: QueryParams | None = None) -> httpx.URL:
        """Join the base URL and path and append the serialized query."""
        url = httpx.URL(f"{self.base_url}{path}")
        query = serialize_query(params)
        if query:
            url = url.copy_merge_params(query)
        return url

    async def fetch_json(self, path: str, params: QueryParams | None = None) -> Any:
        """GET ``path`` and return the decoded, unwrapped body.

        Args:
            path: API path (e.g., "/eth/v1/validators").
            params: Optional query parameters; ``None`` values are dropped.

        Raises:
            ResonanceAPIError: If the API answers with a non-2xx status.
            RequestTimeoutError: If the request exceeds its deadline.
            httpx.TransportError: If the request fails at the network level.
        """
        return await self._request("GET", self.build_url(path, params))

    async def submit_json(self, path: str, body: Any = None) -> Any:
        """POST ``body`` as JSON to ``path`` and return the unwrapped body.

        When ``body`` is None the request is sent without a body.
        """
        return await self._request("POST", self.build_url(path), body)

    async def remove_resource(self, path: str) -> Any:
        """DELETE ``path`` and return the unwrapped body."""
        return await self._request("DELETE", self.build_url(path))

    async def _request(self, method: str, url: httpx.URL, body: Any = None) -> Any:
        """Execute a request and decode the response.

        Handles request execution, error mapping and JSON parsing.
        Logs request details and duration.
        """
        start_time = time.time()
        logger.debug("Making API request", method=method, url=str(url))

        response = await self._execute(method, url, body)
        duration = time.time() - start_time
        logger.debug(
            "API request completed",
            method=method,
            status_code=response.status_code,
            duration_seconds=round(duration, 3),
        )

        if not response.is_success:
            raise_api_error(response)

        if not response.content:
            return None
        return unwrap_envelope(response.json())

    async def _execute(
        self,
        method: str,
        url: httpx.URL,
        body: Any = None,
    ) -> httpx.Response:
        """Send one request under the configured deadline.

        Non-2xx responses are returned, not raised.

        Raises:
            RequestTimeoutError: If no response arrives within the deadline.
            httpx.TransportError: If the request fails at the network level.
        """
        headers = dict(self._headers)
        content = json.dumps(body) if body is not None else None

        try:
            return await asyncio.wait_for(
                self._send(method, url, headers, content),
                timeout=self.timeout_ms / 1000,
            )
        except (asyncio.TimeoutError, httpx.TimeoutException) as exc:
            logger.warning(
                "API request timed out",
                method=method,
                url=str(url),
                timeout_ms=self.timeout_ms,
            )
            raise RequestTimeoutError(self.timeout_ms) from exc

    async def _send(
        self,
        method: str,
        url: httpx.URL,
        headers: dict[str, str],
        content: str | None,
    ) -> httpx.Response:
        """Send the request, retrying GETs on transport failures."""
        attempts = self.max_get_attempts if method == "GET" else 1
        attempt = 1
        while True:
            try:
                return await self.client.request(
                    method,
                    url,
                    headers=headers,
                    content=content,
                )
            except httpx.TimeoutException:
                raise
            except httpx.TransportError:
                if attempt >= attempts:
                    logger.exception("API request failed", method=method, url=str(url))
                    raise
                delay = RETRY_BACKOFF_SECONDS * attempt
                logger.warning(
                    "API request failed, retrying",
                    method=method,
                    url=str(url),
                    attempt=attempt,
                    delay_seconds=delay,
                )
                attempt += 1
                await asyncio.sleep(delay)
