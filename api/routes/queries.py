"""Explorer read-only endpoints.

Every endpoint here projects the shared explorer without changing it.
"""

from typing import Optional

from fastapi import APIRouter, Query

from api.dependencies import ExplorerSessionDep
from api.models import (
    ErrorResponse,
    FileContentsResponse,
    FilesResponse,
    ListingResponse,
    OpenFilesResponse,
    StructureResponse,
    TreeResponse,
    ValidationReportResponse,
    WorkingDirectoryResponse,
)
from models.explorer_state import ExplorerSnapshot

router = APIRouter(
    prefix="/explorer",
    tags=["explorer"],
)


@router.get("/tree", response_model=TreeResponse)
async def get_tree(
    session: ExplorerSessionDep,
    include_collapsed: bool = Query(default=False, description="Descend into collapsed folders"),
):
    """Get the tree as indented text, directories before files."""
    with session.lock:
        tree = session.explorer.get_current_file_tree(include_collapsed=include_collapsed)

    return TreeResponse(tree=tree)


@router.get("/files", response_model=FilesResponse)
async def get_files(session: ExplorerSessionDep):
    """Get the sorted absolute paths of every file."""
    with session.lock:
        files = session.explorer.get_files()

    return FilesResponse(files=files)


@router.get("/ls", response_model=ListingResponse)
async def list_directory(
    session: ExplorerSessionDep,
    path: Optional[str] = Query(default=None, description="Directory to list"),
):
    """Get an ls-style listing of a directory.

    Lists the present working directory when no path is given. A path that
    is not a directory yields an empty listing.
    """
    with session.lock:
        listing = session.explorer.get_ls_string(path)

    return ListingResponse(path=path or "", listing=listing)


@router.get("/structure", response_model=StructureResponse)
async def get_structure(session: ExplorerSessionDep):
    """Get the tree as nested node dictionaries."""
    with session.lock:
        structure = {
            name: item.model_dump()
            for name, item in session.explorer.get_current_file_structure().items()
        }

    return StructureResponse(file_structure=structure)


@router.get("/open-files", response_model=OpenFilesResponse)
async def get_open_files(session: ExplorerSessionDep):
    """Get the sorted list of open files."""
    with session.lock:
        open_files = session.explorer.get_open_files()

    return OpenFilesResponse(open_files=open_files)


@router.get(
    "/contents",
    response_model=FileContentsResponse,
    responses={404: {"model": ErrorResponse}, 400: {"model": ErrorResponse}},
)
async def get_file_contents(
    session: ExplorerSessionDep,
    path: str = Query(description="Path of the file to read"),
):
    """Get the content of one file.

    In strict mode a missing path is a 404 and a directory path is a 400.
    In lenient mode both return empty content.
    """
    with session.lock:
        content = session.explorer.get_file_contents(path)

    return FileContentsResponse(path=path, content=content)


@router.get("/snapshot", response_model=ExplorerSnapshot)
async def get_snapshot(session: ExplorerSessionDep):
    """Get the UI state, tree, open files and working directory."""
    with session.lock:
        return session.explorer.get_snapshot()


@router.get("/pwd", response_model=WorkingDirectoryResponse)
async def get_present_working_directory(session: ExplorerSessionDep):
    """Get the present working directory ("" for the root)."""
    with session.lock:
        pwd = session.explorer.get_present_working_directory()

    return WorkingDirectoryResponse(present_working_directory=pwd)


@router.get("/validate", response_model=ValidationReportResponse)
async def validate_explorer(session: ExplorerSessionDep):
    """Check the explorer state for consistency issues."""
    with session.lock:
        issues = session.explorer.validate_state()
        summary = session.explorer.summary

    return ValidationReportResponse(valid=not issues, issues=issues, summary=summary)
