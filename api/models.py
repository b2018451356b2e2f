"""Request and response models for the explorer endpoints."""

from typing import Any

from pydantic import BaseModel, Field

from models.action import ExplorerAction


class ApplyActionsRequest(BaseModel):
    """Request to apply a batch of actions in order.

    Attributes:
        actions: Actions to apply, first to last.
    """

    actions: list[ExplorerAction] = Field(description="Actions to apply, first to last")


class ApplyActionsResponse(BaseModel):
    """Response after a batch of actions has been applied.

    Attributes:
        applied: Number of actions applied by this request.
        history_length: Total number of actions in the history afterwards.
    """

    applied: int
    history_length: int


class TreeResponse(BaseModel):
    """Indented tree rendering."""

    tree: str


class FilesResponse(BaseModel):
    """Sorted absolute paths of every file."""

    files: list[str]


class ListingResponse(BaseModel):
    """ls-style listing of one directory.

    Attributes:
        path: The directory listed ("" for the working directory).
        listing: Newline-joined child names.
    """

    path: str
    listing: str


class StructureResponse(BaseModel):
    """The tree as nested node dictionaries."""

    file_structure: dict[str, Any]


class HistoryResponse(BaseModel):
    """Every action applied so far, in order."""

    actions: list[ExplorerAction]
    count: int


class OpenFilesResponse(BaseModel):
    """Sorted list of open file paths."""

    open_files: list[str]


class FileContentsResponse(BaseModel):
    """Content of one file."""

    path: str
    content: str


class WorkingDirectoryResponse(BaseModel):
    """Present working directory ("" for the root)."""

    present_working_directory: str


class ValidationReportResponse(BaseModel):
    """Result of a state consistency check.

    Attributes:
        valid: True when no issues were found.
        issues: Human-readable issue descriptions.
        summary: One-line summary of the explorer state.
    """

    valid: bool
    issues: list[str]
    summary: str


class ErrorResponse(BaseModel):
    """Standard error response body.

    Attributes:
        error: Short error title.
        detail: Human-readable description.
    """

    error: str
    detail: str
