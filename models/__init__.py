"""Virtual file explorer data models package.

This package contains the in-memory explorer core: the file tree node
models, the action model and catalog, path resolution, tree serialization,
the UI-state record, and the ExplorerState action dispatcher.
"""

from models.action import ExplorerAction
from models.action_catalog import ExplorerActionName, is_repeatable_action
from models.exceptions import ExplorerError, NotAFileError, PathNotFoundError
from models.explorer_state import ExplorerSnapshot, ExplorerState
from models.nodes import CaretPosition, DirectoryNode, FileItem, FileLeaf, FileStructure
from models.ui_state import ExplorerUIState

__all__ = [
    "ExplorerAction",
    "ExplorerActionName",
    "is_repeatable_action",
    "ExplorerError",
    "NotAFileError",
    "PathNotFoundError",
    "ExplorerSnapshot",
    "ExplorerState",
    "CaretPosition",
    "DirectoryNode",
    "FileItem",
    "FileLeaf",
    "FileStructure",
    "ExplorerUIState",
]
