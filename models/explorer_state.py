"""Explorer state model and action dispatcher."""

import logging
from typing import Any, Callable, Optional, Union

from pydantic import BaseModel, Field, field_validator

from models.action import ExplorerAction
from models.action_catalog import ExplorerActionName as Name
from models.action_catalog import is_repeatable_action
from models.composite import parse_file_contents_value, parse_from_to_value
from models.exceptions import NotAFileError, PathNotFoundError
from models.nodes import (
    DirectoryNode,
    FileItem,
    FileLeaf,
    FileStructure,
    copy_directory_node,
    copy_file_leaf,
    create_directory_node,
    create_file_leaf,
)
from models.paths import (
    ROOT_MARKER,
    locate_parent,
    lookup_node,
    normalize_working_directory,
    resolve_path,
    split_components,
)
from models.serializer import build_tree_string, list_all_file_paths, list_directory
from models.ui_state import ExplorerUIState

logger = logging.getLogger(__name__)


class ExplorerSnapshot(ExplorerUIState):
    """Complete capture of an explorer's UI state and tree.

    Extends the UI-state fields with the data needed to restore an
    ExplorerState wholesale.

    Args:
        file_structure: Deep copy of the tree.
        open_files: Sorted list of open file paths.
        present_working_directory: Root-relative working directory ("" for root).
    """

    file_structure: dict[str, FileItem] = Field(
        default_factory=dict, description="Deep copy of the tree"
    )
    open_files: list[str] = Field(default_factory=list, description="Sorted open file paths")
    present_working_directory: str = Field(
        default="", description="Root-relative working directory"
    )


class ExplorerState(BaseModel):
    """In-memory model of a hierarchical file explorer.

    Actions are replayed one at a time against a virtual tree. Each action
    mutates the tree, the UI state, or both, and is then appended to the
    action history whether or not it had any effect.

    Tree mutations never raise: a missing source, a node of the wrong kind,
    or a malformed value is a no-op. Only file-content lookups and file
    opens can raise, and only when ``strict`` is set.

    The state is not thread-safe. Hosts that share one instance across
    callers must serialize access to it.

    Args:
        file_structure: Root mapping of name to node.
        actions_applied: Every action passed to apply_action, in order.
        open_files: Paths marked open, stored exactly as given.
        ui_state: Context menu and text input state.
        present_working_directory: Directory relative paths resolve against ("" for root).
        verbose: Log every action and lenient-mode misses at INFO.
        strict: Raise on content lookups and opens of missing paths or directories.
        last_repeat_count: Repeat count parsed from the last repeatable action.
        is_repeatable: Predicate deciding whether an action's value is a repeat count.
    """

    file_structure: dict[str, FileItem] = Field(
        default_factory=dict, description="Root mapping of name to node"
    )
    actions_applied: list[ExplorerAction] = Field(
        default_factory=list, description="Every action applied, in order"
    )
    open_files: set[str] = Field(default_factory=set, description="Paths marked open")
    ui_state: ExplorerUIState = Field(
        default_factory=ExplorerUIState, description="Context menu and text input state"
    )
    present_working_directory: str = Field(
        default="", description="Directory relative paths resolve against"
    )
    verbose: bool = Field(default=False, description="Log actions and misses at INFO")
    strict: bool = Field(
        default=True, description="Raise on lookups of missing paths or directories"
    )
    last_repeat_count: int = Field(
        default=1, description="Repeat count parsed from the last repeatable action"
    )
    is_repeatable: Callable[[ExplorerAction], bool] = Field(
        default=is_repeatable_action,
        exclude=True,
        description="Predicate deciding whether an action's value is a repeat count",
    )

    def __init__(self, actions: Optional[list[ExplorerAction]] = None, **data: Any):
        """Create an explorer, optionally replaying an initial list of actions.

        Args:
            actions: Actions to apply in order right after construction.
            **data: Field values (verbose, strict, is_repeatable, ...).
        """
        super().__init__(**data)
        if actions:
            self.apply_actions(actions)

    @field_validator("present_working_directory")
    @classmethod
    def validate_present_working_directory(cls, value: str) -> str:
        """Normalize "~" and stray separators to a root-relative path."""
        return normalize_working_directory(value)

    @classmethod
    def from_snapshot(
        cls, snapshot: Union["ExplorerSnapshot", dict[str, Any]], **data: Any
    ) -> "ExplorerState":
        """Restore an explorer from a previously captured snapshot.

        The tree is deep-copied, so later changes to either side do not
        leak into the other. The action history starts empty.

        Args:
            snapshot: An ExplorerSnapshot or its dict form.
            **data: Extra field values (verbose, strict, ...).

        Returns:
            A new ExplorerState holding the snapshot's tree, UI state,
            open files and working directory.
        """
        if not isinstance(snapshot, ExplorerSnapshot):
            snapshot = ExplorerSnapshot.model_validate(snapshot)
        snapshot = snapshot.model_copy(deep=True)

        ui_fields = set(ExplorerUIState.model_fields)
        return cls(
            file_structure=snapshot.file_structure,
            open_files=set(snapshot.open_files),
            ui_state=ExplorerUIState(**snapshot.model_dump(include=ui_fields)),
            present_working_directory=snapshot.present_working_directory,
            **data,
        )

    # Dispatch

    def apply_actions(self, actions: list[ExplorerAction]) -> None:
        """Apply actions in order. Earlier effects stay if a later one raises."""
        for action in actions:
            self.apply_action(action)

    def apply_action(self, action: Union[ExplorerAction, dict[str, Any]]) -> None:
        """Apply one action to this state.

        Looks up the handler for the action's name and runs it. Unknown
        names are no-ops. The action is appended to the history as the
        last step, even when the handler raises.

        Args:
            action: The ExplorerAction (or its dict form) to apply.

        Raises:
            ValueError: If action is neither an ExplorerAction nor a dict.
            PathNotFoundError: In strict mode, when opening a missing path.
            NotAFileError: In strict mode, when opening a directory.
        """
        if isinstance(action, dict):
            action = ExplorerAction.model_validate(action)
        if not isinstance(action, ExplorerAction):
            raise ValueError(
                f"ExplorerState can only apply ExplorerAction, got {type(action)}"
            )

        if self.is_repeatable(action):
            self.last_repeat_count = self._parse_repeat_count(action.value)

        action_handlers: dict[Name, Callable[[str], None]] = {
            Name.CREATE_FILE: self._handle_create_file,
            Name.CREATE_FOLDER: self._handle_create_folder,
            Name.DELETE_FILE: self._handle_delete,
            Name.DELETE_FOLDER: self._handle_delete,
            Name.RENAME_FILE: self._handle_rename,
            Name.RENAME_FOLDER: self._handle_rename,
            Name.MOVE_FILE: self._handle_move_file,
            Name.MOVE_FOLDER: self._handle_move_folder,
            Name.COPY_FILE: self._handle_copy_file,
            Name.COPY_FOLDER: self._handle_copy_folder,
            Name.TOGGLE_FOLDER: self._handle_toggle_folder,
            Name.EXPAND_FOLDER: self._handle_expand_folder,
            Name.COLLAPSE_FOLDER: self._handle_collapse_folder,
            Name.SET_FILE_CONTENTS: self._handle_set_file_contents,
            Name.OPEN_FILE: self.open_file,
            Name.CLOSE_FILE: self.close_file,
            Name.SET_PRESENT_WORKING_DIRECTORY: self._handle_set_present_working_directory,
            Name.SHOW_CONTEXT_MENU: self._ui_flag("is_file_explorer_context_menu_open", True),
            Name.HIDE_CONTEXT_MENU: self._ui_flag("is_file_explorer_context_menu_open", False),
            Name.SHOW_FILE_CONTEXT_MENU: self._ui_flag("is_file_context_menu_open", True),
            Name.HIDE_FILE_CONTEXT_MENU: self._ui_flag("is_file_context_menu_open", False),
            Name.SHOW_FOLDER_CONTEXT_MENU: self._ui_flag("is_folder_context_menu_open", True),
            Name.HIDE_FOLDER_CONTEXT_MENU: self._ui_flag("is_folder_context_menu_open", False),
            Name.SHOW_NEW_FILE_INPUT: self.ui_state.show_new_file_input,
            Name.HIDE_NEW_FILE_INPUT: lambda _: self.ui_state.hide_new_file_input(),
            Name.TYPE_NEW_FILE_INPUT: self.ui_state.type_new_file_input,
            Name.CLEAR_NEW_FILE_INPUT: lambda _: self.ui_state.clear_new_file_input(),
            Name.ENTER_NEW_FILE_INPUT: lambda _: self.ui_state.enter_new_file_input(),
            Name.SHOW_NEW_FOLDER_INPUT: self.ui_state.show_new_folder_input,
            Name.HIDE_NEW_FOLDER_INPUT: lambda _: self.ui_state.hide_new_folder_input(),
            Name.TYPE_NEW_FOLDER_INPUT: self.ui_state.type_new_folder_input,
            Name.CLEAR_NEW_FOLDER_INPUT: lambda _: self.ui_state.clear_new_folder_input(),
            Name.ENTER_NEW_FOLDER_INPUT: lambda _: self.ui_state.enter_new_folder_input(),
            Name.RENAME_FILE_DRAFT_STATE: self.ui_state.start_file_rename,
            Name.TYPE_RENAME_FILE_INPUT: self.ui_state.type_file_rename,
            Name.ENTER_RENAME_FILE_INPUT: lambda _: self.ui_state.enter_file_rename(),
            Name.RENAME_FOLDER_DRAFT_STATE: self.ui_state.start_folder_rename,
            Name.TYPE_RENAME_FOLDER_INPUT: self.ui_state.type_folder_rename,
            Name.ENTER_RENAME_FOLDER_INPUT: lambda _: self.ui_state.enter_folder_rename(),
        }

        try:
            handler = action_handlers.get(Name(action.name))
        except ValueError:
            handler = None

        try:
            if handler:
                handler(action.value)
            else:
                logger.debug(f"Ignoring unknown action {action.name!r}")
        finally:
            self.actions_applied.append(action)
            if self.verbose:
                logger.info(f"Action: {action.get_summary()}")
            else:
                logger.debug(f"Action: {action.get_summary()}")

    def _parse_repeat_count(self, value: str) -> int:
        try:
            return int(value)
        except ValueError:
            logger.warning(f"Repeatable action has non-numeric value {value!r}, using 1")
            return 1

    def _ui_flag(self, field: str, flag: bool) -> Callable[[str], None]:
        def handler(_value: str) -> None:
            setattr(self.ui_state, field, flag)

        return handler

    def _resolve(self, path: str) -> str:
        return resolve_path(path, self.present_working_directory)

    # Tree handlers

    def _handle_create_file(self, value: str) -> None:
        parent, name = locate_parent(self.file_structure, self._resolve(value))
        if parent is not None:
            parent[name] = create_file_leaf(name)

    def _handle_create_folder(self, value: str) -> None:
        parent, name = locate_parent(self.file_structure, self._resolve(value))
        if parent is not None:
            parent[name] = create_directory_node()

    def _handle_delete(self, value: str) -> None:
        parent, name = locate_parent(self.file_structure, self._resolve(value), create=False)
        if parent is not None:
            parent.pop(name, None)

    def _handle_rename(self, value: str) -> None:
        parsed = self._transfer(value, keep_source=False)
        if parsed is None:
            return
        source_path, destination_path = parsed
        if source_path in self.open_files:
            self.open_files.discard(source_path)
            self.open_files.add(destination_path)

    def _handle_move_file(self, value: str) -> None:
        self._transfer(value, keep_source=False)

    def _handle_move_folder(self, value: str) -> None:
        self._transfer(value, keep_source=False, require_directory=True)

    def _handle_copy_file(self, value: str) -> None:
        self._transfer(value, keep_source=True)

    def _handle_copy_folder(self, value: str) -> None:
        self._transfer(value, keep_source=True, require_directory=True)

    def _transfer(
        self, value: str, keep_source: bool, require_directory: bool = False
    ) -> Optional[tuple[str, str]]:
        """Move or copy the node named by a ``from:<src>;to:<dst>`` value.

        Copies are deep clones. A directory is never placed inside its own
        subtree. The destination is overwritten if occupied.

        Args:
            value: Composite source/destination value.
            keep_source: Copy instead of move.
            require_directory: Skip unless the source is a directory.

        Returns:
            The (source, destination) paths as given, or None if nothing changed.
        """
        parsed = parse_from_to_value(value)
        if parsed is None:
            logger.debug(f"Malformed from/to value {value!r}")
            return None
        source_path, destination_path = parsed

        resolved_source = self._resolve(source_path)
        source_parent, source_name = locate_parent(
            self.file_structure, resolved_source, create=False
        )
        if source_parent is None or source_name not in source_parent:
            return None
        node = source_parent[source_name]
        if require_directory and not isinstance(node, DirectoryNode):
            return None

        resolved_destination = self._resolve(destination_path)
        if isinstance(node, DirectoryNode):
            source_components = split_components(resolved_source)
            destination_components = split_components(resolved_destination)
            if (
                len(destination_components) > len(source_components)
                and destination_components[: len(source_components)] == source_components
            ):
                logger.debug(f"Refusing to place {source_path!r} inside itself")
                return None

        destination_parent, destination_name = locate_parent(
            self.file_structure, resolved_destination
        )
        if destination_parent is None:
            return None

        if keep_source:
            destination_parent[destination_name] = self._clone(node)
        else:
            del source_parent[source_name]
            destination_parent[destination_name] = node
        return source_path, destination_path

    @staticmethod
    def _clone(node: FileItem) -> FileItem:
        if isinstance(node, DirectoryNode):
            return copy_directory_node(node)
        return copy_file_leaf(node)

    def _find_directory(self, value: str) -> Optional[DirectoryNode]:
        node = lookup_node(self.file_structure, self._resolve(value))
        return node if isinstance(node, DirectoryNode) else None

    def _handle_toggle_folder(self, value: str) -> None:
        directory = self._find_directory(value)
        if directory is not None:
            directory.collapsed = not directory.collapsed

    def _handle_expand_folder(self, value: str) -> None:
        directory = self._find_directory(value)
        if directory is not None:
            directory.collapsed = False

    def _handle_collapse_folder(self, value: str) -> None:
        directory = self._find_directory(value)
        if directory is not None:
            directory.collapsed = True

    def _handle_set_file_contents(self, value: str) -> None:
        parsed = parse_file_contents_value(value)
        if parsed is None:
            logger.warning(f"Malformed file contents value {value!r}")
            return
        path, content = parsed

        node = lookup_node(self.file_structure, self._resolve(path))
        if not isinstance(node, FileLeaf):
            logger.warning(f"Cannot set contents of {path!r}: no such file")
            return
        node.content = content

    def _handle_set_present_working_directory(self, value: str) -> None:
        self.present_working_directory = normalize_working_directory(
            value, self.present_working_directory
        )

    # Open files

    def open_file(self, path: str) -> None:
        """Mark a file as open.

        Args:
            path: Path of the file. Stored in the open set exactly as given.

        Raises:
            PathNotFoundError: In strict mode, if nothing exists at the path.
            NotAFileError: In strict mode, if the path is a directory.
        """
        node = lookup_node(self.file_structure, self._resolve(path))
        if node is None:
            self._report_miss(PathNotFoundError(path))
            return
        if isinstance(node, DirectoryNode):
            self._report_miss(NotAFileError.for_open(path))
            return
        self.open_files.add(path)

    def close_file(self, path: str) -> None:
        """Remove a path from the open set. Closing a file that is not open is a no-op."""
        self.open_files.discard(path)

    def _report_miss(self, error: Exception) -> None:
        if self.strict:
            raise error
        if self.verbose:
            logger.info(str(error))

    # Queries

    def get_file_contents(self, path: str) -> str:
        """Return the content of a file.

        Args:
            path: Path of the file, resolved against the working directory.

        Returns:
            The file content. In lenient mode, "" for a missing path or a directory.

        Raises:
            PathNotFoundError: In strict mode, if nothing exists at the path.
            NotAFileError: In strict mode, if the path is a directory.
        """
        node = lookup_node(self.file_structure, self._resolve(path))
        if node is None:
            self._report_miss(PathNotFoundError(path))
            return ""
        if isinstance(node, DirectoryNode):
            self._report_miss(NotAFileError.for_contents(path))
            return ""
        return node.content

    def get_current_file_tree(self, include_collapsed: bool = False) -> str:
        """Return the tree as indented text, directories before files."""
        return build_tree_string(self.file_structure, include_collapsed=include_collapsed)

    def get_files(self) -> list[str]:
        """Return the absolute paths of all files, sorted."""
        return list_all_file_paths(self.file_structure)

    def get_ls_string(self, path: Optional[str] = None) -> str:
        """Return an ls-style listing of a directory (the working directory by default)."""
        target = self.present_working_directory if path is None else self._resolve(path)
        return list_directory(self.file_structure, target)

    def get_current_file_structure(self) -> FileStructure:
        """Return the live tree. Changes made through it affect this state."""
        return self.file_structure

    def get_actions_applied(self) -> list[ExplorerAction]:
        return self.actions_applied

    def get_open_files(self) -> list[str]:
        return sorted(self.open_files)

    def get_present_working_directory(self) -> str:
        return self.present_working_directory

    def get_ui_state(self) -> ExplorerUIState:
        return self.ui_state

    def get_snapshot(self) -> ExplorerSnapshot:
        """Capture the UI state, tree, open files and working directory.

        The snapshot owns deep copies and is safe to keep while this state
        keeps changing.
        """
        snapshot = ExplorerSnapshot(
            **self.ui_state.model_dump(),
            file_structure=self.file_structure,
            open_files=self.get_open_files(),
            present_working_directory=self.present_working_directory,
        )
        return snapshot.model_copy(deep=True)

    def validate_state(self) -> list[str]:
        """Validate internal state consistency and return any issues.

        Checks for:
        - Open files that no longer point at a file in the tree
        - Rename drafts whose original path is not in the tree

        Open paths are accepted if they name a file either from the root or
        from the present working directory. A relative path opened under a
        different working directory than the current one may still be
        reported. Draft paths are checked as root-relative paths.

        Returns:
            List of validation error messages (empty list if valid).
        """
        issues = []

        for path in sorted(self.open_files):
            candidates = (path.removeprefix(ROOT_MARKER), self._resolve(path))
            if not any(
                isinstance(lookup_node(self.file_structure, candidate), FileLeaf)
                for candidate in candidates
            ):
                issues.append(f"Open file {path!r} is not a file in the tree")

        file_draft = self.ui_state.original_file_being_renamed
        if file_draft and not isinstance(lookup_node(self.file_structure, file_draft), FileLeaf):
            issues.append(f"File being renamed {file_draft!r} is not in the tree")

        folder_draft = self.ui_state.original_folder_being_renamed
        if folder_draft and not isinstance(
            lookup_node(self.file_structure, folder_draft), DirectoryNode
        ):
            issues.append(f"Folder being renamed {folder_draft!r} is not in the tree")

        return issues

    def clear(self) -> None:
        """Reset to the empty state a fresh instance starts with.

        Configuration (verbose, strict, is_repeatable) is kept.
        """
        self.file_structure = {}
        self.actions_applied = []
        self.open_files = set()
        self.ui_state = ExplorerUIState()
        self.present_working_directory = ""
        self.last_repeat_count = 1

    @property
    def summary(self) -> str:
        """Return a brief human-readable summary, e.g. "3 files, 2 folders, 1 open"."""
        file_count = 0
        folder_count = 0
        pending: list[FileStructure] = [self.file_structure]
        while pending:
            for item in pending.pop().values():
                if isinstance(item, DirectoryNode):
                    folder_count += 1
                    pending.append(item.children)
                else:
                    file_count += 1
        return f"{file_count} files, {folder_count} folders, {len(self.open_files)} open"
