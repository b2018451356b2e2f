"""Catalog of file explorer action names."""

from enum import Enum

from models.action import ExplorerAction


class ExplorerActionName(str, Enum):
    """Names of every action the explorer understands."""

    CREATE_FILE = "file-explorer-create-file"
    CREATE_FOLDER = "file-explorer-create-folder"
    DELETE_FILE = "file-explorer-delete-file"
    DELETE_FOLDER = "file-explorer-delete-folder"
    RENAME_FILE = "file-explorer-rename-file"
    RENAME_FOLDER = "file-explorer-rename-folder"
    MOVE_FILE = "file-explorer-move-file"
    MOVE_FOLDER = "file-explorer-move-folder"
    COPY_FILE = "file-explorer-copy-file"
    COPY_FOLDER = "file-explorer-copy-folder"
    TOGGLE_FOLDER = "file-explorer-toggle-folder"
    EXPAND_FOLDER = "file-explorer-expand-folder"
    COLLAPSE_FOLDER = "file-explorer-collapse-folder"
    SET_FILE_CONTENTS = "file-explorer-set-file-contents"
    OPEN_FILE = "file-explorer-open-file"
    CLOSE_FILE = "file-explorer-close-file"
    SET_PRESENT_WORKING_DIRECTORY = "file-explorer-set-present-working-directory"

    SHOW_CONTEXT_MENU = "file-explorer-show-context-menu"
    HIDE_CONTEXT_MENU = "file-explorer-hide-context-menu"
    SHOW_FILE_CONTEXT_MENU = "file-explorer-show-file-context-menu"
    HIDE_FILE_CONTEXT_MENU = "file-explorer-hide-file-context-menu"
    SHOW_FOLDER_CONTEXT_MENU = "file-explorer-show-folder-context-menu"
    HIDE_FOLDER_CONTEXT_MENU = "file-explorer-hide-folder-context-menu"

    SHOW_NEW_FILE_INPUT = "file-explorer-show-new-file-input"
    HIDE_NEW_FILE_INPUT = "file-explorer-hide-new-file-input"
    TYPE_NEW_FILE_INPUT = "file-explorer-type-new-file-input"
    CLEAR_NEW_FILE_INPUT = "file-explorer-clear-new-file-input"
    ENTER_NEW_FILE_INPUT = "file-explorer-enter-new-file-input"
    SHOW_NEW_FOLDER_INPUT = "file-explorer-show-new-folder-input"
    HIDE_NEW_FOLDER_INPUT = "file-explorer-hide-new-folder-input"
    TYPE_NEW_FOLDER_INPUT = "file-explorer-type-new-folder-input"
    CLEAR_NEW_FOLDER_INPUT = "file-explorer-clear-new-folder-input"
    ENTER_NEW_FOLDER_INPUT = "file-explorer-enter-new-folder-input"

    RENAME_FILE_DRAFT_STATE = "file-explorer-rename-file-draft-state"
    TYPE_RENAME_FILE_INPUT = "file-explorer-type-rename-file-input"
    ENTER_RENAME_FILE_INPUT = "file-explorer-enter-rename-file-input"
    RENAME_FOLDER_DRAFT_STATE = "file-explorer-rename-folder-draft-state"
    TYPE_RENAME_FOLDER_INPUT = "file-explorer-type-rename-folder-input"
    ENTER_RENAME_FOLDER_INPUT = "file-explorer-enter-rename-folder-input"


# None of the explorer actions carry a repeat count in their value.
REPEATABLE_ACTION_NAMES: frozenset[str] = frozenset()


def is_repeatable_action(action: ExplorerAction) -> bool:
    """Return True if the action's value is a repeat count rather than a payload."""
    return action.name in REPEATABLE_ACTION_NAMES
