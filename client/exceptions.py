"""Exception hierarchy for the explorer API client.

Exception Hierarchy:
    ExplorerClientError (base)
    ├── ConnectionError - Network/connection failures
    ├── TimeoutError - Request timeout
    └── APIError - Server returned an error response
        ├── BadRequestError (HTTP 400)
        ├── NotFoundError (HTTP 404)
        ├── ValidationError (HTTP 422)
        └── ServerError (HTTP 5xx)

Example:
    Catching a missing file::

        try:
            client.get_file_contents("src/missing.ts")
        except NotFoundError as e:
            print(f"No such file: {e.path}")
"""

from typing import Any


class ExplorerClientError(Exception):
    """Base exception for all explorer client errors.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class ConnectionError(ExplorerClientError):
    """Failed to connect to the explorer server.

    Attributes:
        message: Human-readable error description.
        url: The URL that failed to connect.
        cause: The underlying exception that caused the connection failure.
    """

    def __init__(
        self,
        message: str,
        url: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.url = url
        self.cause = cause
        super().__init__(message)

    def __str__(self) -> str:
        if self.url:
            return f"{self.message} (url: {self.url})"
        return self.message


class TimeoutError(ExplorerClientError):
    """Request timed out.

    Attributes:
        message: Human-readable error description.
        timeout: The timeout value in seconds.
        url: The URL that timed out.
    """

    def __init__(
        self,
        message: str,
        timeout: float | None = None,
        url: str | None = None,
    ) -> None:
        self.timeout = timeout
        self.url = url
        super().__init__(message)

    def __str__(self) -> str:
        if self.timeout is not None:
            return f"{self.message} (timeout: {self.timeout}s)"
        return self.message


class APIError(ExplorerClientError):
    """Server returned an error response.

    Attributes:
        message: Human-readable error message.
        status_code: HTTP status code from the server.
        error_type: Error title from the response body (if available).
        path: The explorer path the server complained about (if available).
        response_body: Raw response body for debugging.
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        error_type: str | None = None,
        path: str | None = None,
        response_body: Any = None,
    ) -> None:
        self.status_code = status_code
        self.error_type = error_type
        self.path = path
        self.response_body = response_body
        super().__init__(message)

    def __str__(self) -> str:
        if self.error_type:
            return f"[HTTP {self.status_code}] [{self.error_type}] {self.message}"
        return f"[HTTP {self.status_code}] {self.message}"


class BadRequestError(APIError):
    """Request was rejected (HTTP 400), e.g. reading a directory as a file."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(message=message, status_code=400, **kwargs)


class NotFoundError(APIError):
    """Path not found (HTTP 404)."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(message=message, status_code=404, **kwargs)


class ValidationError(APIError):
    """Request validation failed (HTTP 422)."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(message=message, status_code=422, **kwargs)


class ServerError(APIError):
    """Server-side error (HTTP 5xx).

    If retry logic is enabled, 502/503/504 responses are retried first.
    """

    def __init__(self, message: str, status_code: int = 500, **kwargs: Any) -> None:
        super().__init__(message=message, status_code=status_code, **kwargs)
