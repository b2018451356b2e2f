"""Main explorer client classes.

This module provides the entry points for talking to the explorer API:
- ExplorerClient: Synchronous client
- AsyncExplorerClient: Asynchronous client

Example:
    Synchronous usage::

        from client import ExplorerClient

        with ExplorerClient(base_url="http://localhost:8000") as client:
            client.apply_action("file-explorer-create-file", "src/index.ts")
            print(client.get_tree().tree)

    Asynchronous usage::

        from client import AsyncExplorerClient

        async with AsyncExplorerClient() as client:
            await client.apply_action("file-explorer-create-folder", "src")
"""

from typing import Any, Union

from client._http import AsyncHTTPClient, HTTPClient
from client.models import (
    ApplyActionsResponse,
    ExplorerSnapshot,
    FileContentsResponse,
    FilesResponse,
    HealthResponse,
    HistoryResponse,
    ListingResponse,
    OpenFilesResponse,
    StructureResponse,
    TreeResponse,
    ValidationReportResponse,
    WorkingDirectoryResponse,
)
from models.action import ExplorerAction

_BASE_PATH = "/explorer"

ActionLike = Union[ExplorerAction, dict[str, Any]]


def _actions_body(actions: list[ActionLike]) -> dict[str, Any]:
    # Dicts are sent as-is and validated by the server
    return {
        "actions": [
            action.model_dump() if isinstance(action, ExplorerAction) else action
            for action in actions
        ]
    }


def _snapshot_body(snapshot: Union[ExplorerSnapshot, dict[str, Any]]) -> dict[str, Any]:
    if isinstance(snapshot, dict):
        snapshot = ExplorerSnapshot.model_validate(snapshot)
    return snapshot.model_dump(mode="json")


class ExplorerClient:
    """Synchronous client for the explorer REST API.

    Supports the context manager protocol for automatic resource cleanup.

    Example:
        with ExplorerClient() as client:
            client.apply_actions([
                {"name": "file-explorer-create-folder", "value": "src"},
                {"name": "file-explorer-create-file", "value": "src/app.ts"},
            ])
            files = client.get_files().files
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        timeout: float = 30.0,
        retry_enabled: bool = False,
        max_retries: int = 3,
        transport: Any = None,
    ) -> None:
        """Initialize the explorer client.

        Args:
            base_url: The base URL of the explorer server.
            timeout: Request timeout in seconds.
            retry_enabled: Whether to retry connection errors, timeouts and
                HTTP 502/503/504 with exponential backoff.
            max_retries: Maximum number of retry attempts when retry is enabled.
            transport: Custom HTTP transport (e.g., ASGITransport for testing).
        """
        self._http = HTTPClient(
            base_url=base_url,
            timeout=timeout,
            retry_enabled=retry_enabled,
            max_retries=max_retries,
            transport=transport,
        )

    def __enter__(self) -> "ExplorerClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the client and release resources."""
        self._http.close()

    # Actions

    def apply_action(self, name: str, value: str = "") -> ApplyActionsResponse:
        """Apply a single action.

        Raises:
            NotFoundError: In strict mode, when an open-file names a missing path.
            BadRequestError: In strict mode, when an open-file names a directory.
        """
        return self.apply_actions([ExplorerAction(name=name, value=value)])

    def apply_actions(self, actions: list[ActionLike]) -> ApplyActionsResponse:
        """Apply a batch of actions in order."""
        data = self._http.post(f"{_BASE_PATH}/actions", json=_actions_body(actions))
        return ApplyActionsResponse(**data)

    def reset(self) -> HistoryResponse:
        """Clear the explorer."""
        return HistoryResponse(**self._http.post(f"{_BASE_PATH}/reset"))

    def restore(self, snapshot: Union[ExplorerSnapshot, dict[str, Any]]) -> ExplorerSnapshot:
        """Replace the server's explorer with one restored from a snapshot."""
        data = self._http.post(f"{_BASE_PATH}/restore", json=_snapshot_body(snapshot))
        return ExplorerSnapshot.model_validate(data)

    # Queries

    def get_tree(self, include_collapsed: bool = False) -> TreeResponse:
        data = self._http.get(
            f"{_BASE_PATH}/tree", params={"include_collapsed": include_collapsed}
        )
        return TreeResponse(**data)

    def get_files(self) -> FilesResponse:
        return FilesResponse(**self._http.get(f"{_BASE_PATH}/files"))

    def ls(self, path: str | None = None) -> ListingResponse:
        """List a directory (the working directory when path is None)."""
        return ListingResponse(**self._http.get(f"{_BASE_PATH}/ls", params={"path": path}))

    def get_structure(self) -> StructureResponse:
        return StructureResponse(**self._http.get(f"{_BASE_PATH}/structure"))

    def get_history(self) -> HistoryResponse:
        return HistoryResponse(**self._http.get(f"{_BASE_PATH}/history"))

    def get_open_files(self) -> OpenFilesResponse:
        return OpenFilesResponse(**self._http.get(f"{_BASE_PATH}/open-files"))

    def get_file_contents(self, path: str) -> FileContentsResponse:
        """Read one file.

        Raises:
            NotFoundError: In strict mode, if the path does not exist.
            BadRequestError: In strict mode, if the path is a directory.
        """
        data = self._http.get(f"{_BASE_PATH}/contents", params={"path": path})
        return FileContentsResponse(**data)

    def get_snapshot(self) -> ExplorerSnapshot:
        return ExplorerSnapshot.model_validate(self._http.get(f"{_BASE_PATH}/snapshot"))

    def get_present_working_directory(self) -> WorkingDirectoryResponse:
        return WorkingDirectoryResponse(**self._http.get(f"{_BASE_PATH}/pwd"))

    def validate(self) -> ValidationReportResponse:
        return ValidationReportResponse(**self._http.get(f"{_BASE_PATH}/validate"))

    def health(self) -> HealthResponse:
        return HealthResponse(**self._http.get("/health"))


class AsyncExplorerClient:
    """Asynchronous client for the explorer REST API.

    Same methods as ExplorerClient, as coroutines.

    Example:
        async with AsyncExplorerClient() as client:
            await client.apply_action("file-explorer-create-file", "notes.md")
            snapshot = await client.get_snapshot()
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        timeout: float = 30.0,
        retry_enabled: bool = False,
        max_retries: int = 3,
        transport: Any = None,
    ) -> None:
        self._http = AsyncHTTPClient(
            base_url=base_url,
            timeout=timeout,
            retry_enabled=retry_enabled,
            max_retries=max_retries,
            transport=transport,
        )

    async def __aenter__(self) -> "AsyncExplorerClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def close(self) -> None:
        await self._http.close()

    async def apply_action(self, name: str, value: str = "") -> ApplyActionsResponse:
        return await self.apply_actions([ExplorerAction(name=name, value=value)])

    async def apply_actions(self, actions: list[ActionLike]) -> ApplyActionsResponse:
        data = await self._http.post(f"{_BASE_PATH}/actions", json=_actions_body(actions))
        return ApplyActionsResponse(**data)

    async def reset(self) -> HistoryResponse:
        return HistoryResponse(**await self._http.post(f"{_BASE_PATH}/reset"))

    async def restore(
        self, snapshot: Union[ExplorerSnapshot, dict[str, Any]]
    ) -> ExplorerSnapshot:
        data = await self._http.post(f"{_BASE_PATH}/restore", json=_snapshot_body(snapshot))
        return ExplorerSnapshot.model_validate(data)

    async def get_tree(self, include_collapsed: bool = False) -> TreeResponse:
        data = await self._http.get(
            f"{_BASE_PATH}/tree", params={"include_collapsed": include_collapsed}
        )
        return TreeResponse(**data)

    async def get_files(self) -> FilesResponse:
        return FilesResponse(**await self._http.get(f"{_BASE_PATH}/files"))

    async def ls(self, path: str | None = None) -> ListingResponse:
        data = await self._http.get(f"{_BASE_PATH}/ls", params={"path": path})
        return ListingResponse(**data)

    async def get_structure(self) -> StructureResponse:
        return StructureResponse(**await self._http.get(f"{_BASE_PATH}/structure"))

    async def get_history(self) -> HistoryResponse:
        return HistoryResponse(**await self._http.get(f"{_BASE_PATH}/history"))

    async def get_open_files(self) -> OpenFilesResponse:
        return OpenFilesResponse(**await self._http.get(f"{_BASE_PATH}/open-files"))

    async def get_file_contents(self, path: str) -> FileContentsResponse:
        data = await self._http.get(f"{_BASE_PATH}/contents", params={"path": path})
        return FileContentsResponse(**data)

    async def get_snapshot(self) -> ExplorerSnapshot:
        data = await self._http.get(f"{_BASE_PATH}/snapshot")
        return ExplorerSnapshot.model_validate(data)

    async def get_present_working_directory(self) -> WorkingDirectoryResponse:
        return WorkingDirectoryResponse(**await self._http.get(f"{_BASE_PATH}/pwd"))

    async def validate(self) -> ValidationReportResponse:
        return ValidationReportResponse(**await self._http.get(f"{_BASE_PATH}/validate"))

    async def health(self) -> HealthResponse:
        return HealthResponse(**await self._http.get("/health"))
