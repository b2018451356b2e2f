"""Explorer UI state: context menus and in-progress text input."""

from pydantic import BaseModel

from models.nodes import get_file_extension, strip_file_extension
from models.paths import split_components


class ExplorerUIState(BaseModel):
    """Non-tree state tracked for the explorer's create and rename flows.

    Every field starts at its zero value and is set independently. File
    rename fields and folder rename fields never affect each other.

    Args:
        is_file_explorer_context_menu_open: Explorer background context menu is open.
        is_file_context_menu_open: File context menu is open.
        is_folder_context_menu_open: Folder context menu is open.
        is_new_file_input_visible: New-file name input is visible.
        is_new_folder_input_visible: New-folder name input is visible.
        new_file_input_value: Text typed so far into the new-file input.
        new_folder_input_value: Text typed so far into the new-folder input.
        new_file_parent_path: Directory the pending new file will be created in.
        new_folder_parent_path: Directory the pending new folder will be created in.
        is_rename_file_input_visible: File rename input is visible.
        original_file_being_renamed: Path of the file being renamed.
        rename_file_input_value: Current file rename input text.
        is_rename_folder_input_visible: Folder rename input is visible.
        original_folder_being_renamed: Path of the folder being renamed.
        rename_folder_input_value: Current folder rename input text.
    """

    is_file_explorer_context_menu_open: bool = False
    is_file_context_menu_open: bool = False
    is_folder_context_menu_open: bool = False
    is_new_file_input_visible: bool = False
    is_new_folder_input_visible: bool = False
    new_file_input_value: str = ""
    new_folder_input_value: str = ""
    new_file_parent_path: str = ""
    new_folder_parent_path: str = ""
    is_rename_file_input_visible: bool = False
    original_file_being_renamed: str = ""
    rename_file_input_value: str = ""
    is_rename_folder_input_visible: bool = False
    original_folder_being_renamed: str = ""
    rename_folder_input_value: str = ""

    # New file input

    def show_new_file_input(self, parent_path: str) -> None:
        self.is_new_file_input_visible = True
        self.new_file_parent_path = parent_path

    def hide_new_file_input(self) -> None:
        self.is_new_file_input_visible = False

    def type_new_file_input(self, text: str) -> None:
        """Append typed text to the new-file input."""
        self.new_file_input_value += text

    def clear_new_file_input(self) -> None:
        """Empty the new-file input and forget both pending parent paths."""
        self.new_file_input_value = ""
        self._clear_parent_paths()

    def enter_new_file_input(self) -> None:
        self.is_new_file_input_visible = False
        self.new_file_input_value = ""
        self.new_file_parent_path = ""

    # New folder input

    def show_new_folder_input(self, parent_path: str) -> None:
        self.is_new_folder_input_visible = True
        self.new_folder_parent_path = parent_path

    def hide_new_folder_input(self) -> None:
        self.is_new_folder_input_visible = False

    def type_new_folder_input(self, text: str) -> None:
        """Append typed text to the new-folder input."""
        self.new_folder_input_value += text

    def clear_new_folder_input(self) -> None:
        """Empty the new-folder input and forget both pending parent paths."""
        self.new_folder_input_value = ""
        self._clear_parent_paths()

    def enter_new_folder_input(self) -> None:
        self.is_new_folder_input_visible = False
        self.new_folder_input_value = ""
        self.new_folder_parent_path = ""

    def _clear_parent_paths(self) -> None:
        self.new_file_parent_path = ""
        self.new_folder_parent_path = ""

    # Rename drafts

    def start_file_rename(self, path: str) -> None:
        """Begin renaming a file, seeding the input with its extensionless name."""
        components = split_components(path)
        name = components[-1] if components else ""
        self.original_file_being_renamed = path
        self.rename_file_input_value = strip_file_extension(name)
        self.is_rename_file_input_visible = True

    def type_file_rename(self, text: str) -> None:
        """Replace the file rename input, keeping the original file's extension.

        The extension comes from the path recorded when the draft started.
        """
        components = split_components(self.original_file_being_renamed)
        extension = get_file_extension(components[-1]) if components else ""
        self.rename_file_input_value = f"{text}.{extension}" if extension else text

    def enter_file_rename(self) -> None:
        self.is_rename_file_input_visible = False
        self.original_file_being_renamed = ""
        self.rename_file_input_value = ""

    def start_folder_rename(self, path: str) -> None:
        """Begin renaming a folder, seeding the input with its full name."""
        components = split_components(path)
        self.original_folder_being_renamed = path
        self.rename_folder_input_value = components[-1] if components else ""
        self.is_rename_folder_input_visible = True

    def type_folder_rename(self, text: str) -> None:
        self.rename_folder_input_value = text

    def enter_folder_rename(self) -> None:
        self.is_rename_folder_input_visible = False
        self.original_folder_being_renamed = ""
        self.rename_folder_input_value = ""
