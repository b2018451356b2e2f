"""Internal HTTP handling utilities for the explorer client.

This module provides the low-level HTTP layer used by the explorer clients:
- Making HTTP requests (sync and async)
- Response parsing and error mapping
- Retry logic with exponential backoff

This is an internal module and should not be imported directly by users.
"""

import asyncio
import time
from typing import Any, Literal

import httpx

from client.exceptions import (
    APIError,
    BadRequestError,
    ConnectionError,
    NotFoundError,
    ServerError,
    TimeoutError,
    ValidationError,
)

HttpMethod = Literal["GET", "POST"]

# Status codes that trigger automatic retry (when retry is enabled)
RETRYABLE_STATUS_CODES = {502, 503, 504}

DEFAULT_RETRY_BACKOFF_BASE = 0.5  # seconds
DEFAULT_RETRY_BACKOFF_MAX = 30.0  # seconds


def _parse_error_response(response: httpx.Response) -> tuple[str, str | None, str | None]:
    """Extract (message, error title, explorer path) from an error response.

    Understands the server's ``{"error", "detail", "path"}`` bodies and
    FastAPI's own ``{"detail": [...]}`` request validation bodies. Falls
    back to the raw text when the body is not JSON.
    """
    try:
        body = response.json()
    except ValueError:
        text = response.text.strip()
        return text or f"HTTP {response.status_code} error", None, None

    if not isinstance(body, dict):
        return str(body), None, None

    detail = body.get("detail")
    if isinstance(detail, list):
        messages = [
            f"{err.get('loc', ['unknown'])[-1]}: {err.get('msg', 'invalid')}"
            for err in detail
        ]
        return "; ".join(messages), "Validation Error", None
    if isinstance(detail, str):
        return detail, body.get("error"), body.get("path")
    if "error" in body:
        return str(body["error"]), body.get("error"), body.get("path")
    return str(body), None, None


def _raise_for_status(response: httpx.Response) -> None:
    """Raise the exception matching an error status code.

    Raises:
        BadRequestError: For HTTP 400 responses.
        NotFoundError: For HTTP 404 responses.
        ValidationError: For HTTP 422 responses.
        ServerError: For HTTP 5xx responses.
        APIError: For other HTTP 4xx responses.
    """
    if response.is_success:
        return

    message, error_type, path = _parse_error_response(response)
    try:
        response_body = response.json()
    except ValueError:
        response_body = response.text

    kwargs = {"error_type": error_type, "path": path, "response_body": response_body}
    status_code = response.status_code
    if status_code == 400:
        raise BadRequestError(message, **kwargs)
    if status_code == 404:
        raise NotFoundError(message, **kwargs)
    if status_code == 422:
        raise ValidationError(message, **kwargs)
    if status_code >= 500:
        raise ServerError(message, status_code=status_code, **kwargs)
    raise APIError(message, status_code=status_code, **kwargs)


def _calculate_backoff(attempt: int, base: float = DEFAULT_RETRY_BACKOFF_BASE) -> float:
    """Return the delay before retry ``attempt`` (0-indexed): base * 2^attempt, capped."""
    return min(base * (2 ** attempt), DEFAULT_RETRY_BACKOFF_MAX)


def _clean_params(params: dict[str, Any] | None) -> dict[str, Any] | None:
    if not params:
        return params
    return {key: value for key, value in params.items() if value is not None}


class HTTPClient:
    """Synchronous HTTP client for the explorer API.

    Attributes:
        base_url: The base URL for all API requests.
        timeout: Request timeout in seconds.
        retry_enabled: Whether to retry on transient failures.
        max_retries: Maximum number of retry attempts.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        retry_enabled: bool = False,
        max_retries: int = 3,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.retry_enabled = retry_enabled
        self.max_retries = max_retries

        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "HTTPClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def request(
        self,
        method: HttpMethod,
        path: str,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> Any:
        """Make an HTTP request and return the parsed JSON response.

        Args:
            method: The HTTP method.
            path: The URL path (appended to base_url).
            params: Query parameters; None values are dropped.
            json: JSON body to send with the request.

        Returns:
            The parsed JSON response body, or None for empty responses.

        Raises:
            ConnectionError: If the connection fails.
            TimeoutError: If the request times out.
            APIError: If the server returns an error response.
        """
        url = f"{self.base_url}{path}"
        params = _clean_params(params)
        attempts = self.max_retries + 1 if self.retry_enabled else 1

        for attempt in range(attempts):
            is_last = attempt >= attempts - 1
            try:
                response = self._client.request(method=method, url=path, params=params, json=json)
            except httpx.ConnectError as e:
                if is_last:
                    raise ConnectionError(f"Failed to connect to {url}", url=url, cause=e) from e
            except httpx.TimeoutException as e:
                if is_last:
                    raise TimeoutError(
                        f"Request to {url} timed out", timeout=self.timeout, url=url
                    ) from e
            else:
                if is_last or response.status_code not in RETRYABLE_STATUS_CODES:
                    _raise_for_status(response)
                    return response.json() if response.content else None
            time.sleep(_calculate_backoff(attempt))

        raise RuntimeError("Unexpected error in request retry loop")

    def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return self.request("GET", path, params=params)

    def post(
        self,
        path: str,
        json: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        return self.request("POST", path, params=params, json=json)


class AsyncHTTPClient:
    """Asynchronous HTTP client for the explorer API.

    Mirrors HTTPClient on top of httpx.AsyncClient.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        retry_enabled: bool = False,
        max_retries: int = 3,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.retry_enabled = retry_enabled
        self.max_retries = max_retries

        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
        )

    async def close(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "AsyncHTTPClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def request(
        self,
        method: HttpMethod,
        path: str,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> Any:
        """Make an async HTTP request and return the parsed JSON response.

        See HTTPClient.request for arguments, return value and errors.
        """
        url = f"{self.base_url}{path}"
        params = _clean_params(params)
        attempts = self.max_retries + 1 if self.retry_enabled else 1

        for attempt in range(attempts):
            is_last = attempt >= attempts - 1
            try:
                response = await self._client.request(
                    method=method, url=path, params=params, json=json
                )
            except httpx.ConnectError as e:
                if is_last:
                    raise ConnectionError(f"Failed to connect to {url}", url=url, cause=e) from e
            except httpx.TimeoutException as e:
                if is_last:
                    raise TimeoutError(
                        f"Request to {url} timed out", timeout=self.timeout, url=url
                    ) from e
            else:
                if is_last or response.status_code not in RETRYABLE_STATUS_CODES:
                    _raise_for_status(response)
                    return response.json() if response.content else None
            await asyncio.sleep(_calculate_backoff(attempt))

        raise RuntimeError("Unexpected error in request retry loop")

    async def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return await self.request("GET", path, params=params)

    async def post(
        self,
        path: str,
        json: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        return await self.request("POST", path, params=params, json=json)
