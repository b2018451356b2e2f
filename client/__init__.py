"""Virtual File Explorer API Client Library.

This module provides a type-safe Python client for the explorer REST API.
It supports both synchronous and asynchronous usage patterns.

Exports:
    ExplorerClient: Synchronous client.
    AsyncExplorerClient: Asynchronous client.

    Exceptions:
        ExplorerClientError: Base exception for all client errors.
        ConnectionError: Failed to connect to the server.
        TimeoutError: Request timed out.
        APIError: Server returned an error response.
        BadRequestError: Request rejected (HTTP 400).
        NotFoundError: Path not found (HTTP 404).
        ValidationError: Request validation failed (HTTP 422).
        ServerError: Server-side error (HTTP 5xx).
"""

from client.client import AsyncExplorerClient, ExplorerClient
from client.exceptions import (
    APIError,
    BadRequestError,
    ConnectionError,
    ExplorerClientError,
    NotFoundError,
    ServerError,
    TimeoutError,
    ValidationError,
)

__all__ = [
    "AsyncExplorerClient",
    "ExplorerClient",
    "APIError",
    "BadRequestError",
    "ConnectionError",
    "ExplorerClientError",
    "NotFoundError",
    "ServerError",
    "TimeoutError",
    "ValidationError",
]
