"""Client response models for the explorer API client.

Re-exports the API layer's request/response models so client users do not
import from ``api`` directly.
"""

from pydantic import BaseModel

from api.models import (
    ApplyActionsRequest,
    ApplyActionsResponse,
    FileContentsResponse,
    FilesResponse,
    HistoryResponse,
    ListingResponse,
    OpenFilesResponse,
    StructureResponse,
    TreeResponse,
    ValidationReportResponse,
    WorkingDirectoryResponse,
)
from models.explorer_state import ExplorerSnapshot

__all__ = [
    "ApplyActionsRequest",
    "ApplyActionsResponse",
    "ExplorerSnapshot",
    "FileContentsResponse",
    "FilesResponse",
    "HealthResponse",
    "HistoryResponse",
    "ListingResponse",
    "OpenFilesResponse",
    "StructureResponse",
    "TreeResponse",
    "ValidationReportResponse",
    "WorkingDirectoryResponse",
]


class HealthResponse(BaseModel):
    """Response model for the health check endpoint."""

    status: str
