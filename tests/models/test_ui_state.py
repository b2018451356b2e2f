"""Unit tests for explorer UI state, driven through ExplorerState actions.

This test suite covers:
1. Context menu flags
2. New file / new folder input flows
3. File and folder rename drafts
"""

import pytest

from models.action_catalog import ExplorerActionName as Name
from models.ui_state import ExplorerUIState
from tests.fixtures.explorer import create_action


class TestExplorerUIStateDefaults:
    """Test ExplorerUIState defaults."""

    def test_all_fields_start_at_zero_values(self):
        """Test that every flag is False and every string is empty."""
        ui_state = ExplorerUIState()

        for field, value in ui_state.model_dump().items():
            assert value in (False, ""), field


class TestContextMenus:
    """Test show/hide context menu actions."""

    @pytest.mark.parametrize(
        "show,hide,field",
        [
            (Name.SHOW_CONTEXT_MENU, Name.HIDE_CONTEXT_MENU, "is_file_explorer_context_menu_open"),
            (Name.SHOW_FILE_CONTEXT_MENU, Name.HIDE_FILE_CONTEXT_MENU, "is_file_context_menu_open"),
            (
                Name.SHOW_FOLDER_CONTEXT_MENU,
                Name.HIDE_FOLDER_CONTEXT_MENU,
                "is_folder_context_menu_open",
            ),
        ],
    )
    def test_show_and_hide(self, empty_explorer, show, hide, field):
        """Test that each menu flag is set and cleared by its own actions."""
        empty_explorer.apply_action(create_action(show))
        assert getattr(empty_explorer.get_ui_state(), field) is True

        empty_explorer.apply_action(create_action(hide))
        assert getattr(empty_explorer.get_ui_state(), field) is False

    def test_ui_actions_never_touch_tree(self, project_explorer):
        """Test that UI actions leave the tree alone."""
        before = project_explorer.get_current_file_tree(include_collapsed=True)

        project_explorer.apply_actions([
            create_action(Name.SHOW_FOLDER_CONTEXT_MENU),
            create_action(Name.SHOW_NEW_FILE_INPUT, "src"),
            create_action(Name.TYPE_NEW_FILE_INPUT, "new.ts"),
            create_action(Name.ENTER_NEW_FILE_INPUT),
        ])

        assert project_explorer.get_current_file_tree(include_collapsed=True) == before


class TestNewItemInputs:
    """Test new file and new folder input flows."""

    def test_new_file_input_flow(self, empty_explorer):
        """Test show, cumulative typing, then enter."""
        empty_explorer.apply_actions([
            create_action(Name.SHOW_NEW_FILE_INPUT, "src"),
            create_action(Name.TYPE_NEW_FILE_INPUT, "ind"),
            create_action(Name.TYPE_NEW_FILE_INPUT, "ex.ts"),
        ])
        ui_state = empty_explorer.get_ui_state()
        assert ui_state.is_new_file_input_visible is True
        assert ui_state.new_file_parent_path == "src"
        assert ui_state.new_file_input_value == "index.ts"

        empty_explorer.apply_action(create_action(Name.ENTER_NEW_FILE_INPUT))

        assert ui_state.is_new_file_input_visible is False
        assert ui_state.new_file_input_value == ""
        assert ui_state.new_file_parent_path == ""

    def test_hide_keeps_typed_value(self, empty_explorer):
        """Test that hiding only flips visibility."""
        empty_explorer.apply_actions([
            create_action(Name.SHOW_NEW_FOLDER_INPUT, "docs"),
            create_action(Name.TYPE_NEW_FOLDER_INPUT, "api"),
            create_action(Name.HIDE_NEW_FOLDER_INPUT),
        ])

        ui_state = empty_explorer.get_ui_state()
        assert ui_state.is_new_folder_input_visible is False
        assert ui_state.new_folder_input_value == "api"

    @pytest.mark.parametrize("clear", [Name.CLEAR_NEW_FILE_INPUT, Name.CLEAR_NEW_FOLDER_INPUT])
    def test_clear_resets_both_parent_paths(self, empty_explorer, clear):
        """Test that either clear action forgets both pending parents."""
        empty_explorer.apply_actions([
            create_action(Name.SHOW_NEW_FILE_INPUT, "src"),
            create_action(Name.SHOW_NEW_FOLDER_INPUT, "docs"),
            create_action(clear),
        ])

        ui_state = empty_explorer.get_ui_state()
        assert ui_state.new_file_parent_path == ""
        assert ui_state.new_folder_parent_path == ""

    def test_clear_new_folder_input_keeps_file_value(self, empty_explorer):
        """Test that clearing the folder input leaves the file input text."""
        empty_explorer.apply_actions([
            create_action(Name.TYPE_NEW_FILE_INPUT, "a.ts"),
            create_action(Name.TYPE_NEW_FOLDER_INPUT, "lib"),
            create_action(Name.CLEAR_NEW_FOLDER_INPUT),
        ])

        ui_state = empty_explorer.get_ui_state()
        assert ui_state.new_folder_input_value == ""
        assert ui_state.new_file_input_value == "a.ts"


class TestRenameDrafts:
    """Test file and folder rename drafts."""

    def test_file_rename_draft_seeds_name_without_extension(self, project_explorer):
        """Test that the draft starts from the extensionless file name."""
        project_explorer.apply_action(create_action(Name.RENAME_FILE_DRAFT_STATE, "src/index.ts"))

        ui_state = project_explorer.get_ui_state()
        assert ui_state.is_rename_file_input_visible is True
        assert ui_state.original_file_being_renamed == "src/index.ts"
        assert ui_state.rename_file_input_value == "index"

    def test_typing_replaces_and_reappends_extension(self, project_explorer):
        """Test that typing replaces the value and keeps the original extension."""
        project_explorer.apply_actions([
            create_action(Name.RENAME_FILE_DRAFT_STATE, "src/index.ts"),
            create_action(Name.TYPE_RENAME_FILE_INPUT, "ma"),
            create_action(Name.TYPE_RENAME_FILE_INPUT, "main"),
        ])

        assert project_explorer.get_ui_state().rename_file_input_value == "main.ts"

    def test_typing_without_extension(self, empty_explorer):
        """Test that a file with no extension gets none appended."""
        empty_explorer.apply_actions([
            create_action(Name.RENAME_FILE_DRAFT_STATE, "Makefile"),
            create_action(Name.TYPE_RENAME_FILE_INPUT, "Justfile"),
        ])

        assert empty_explorer.get_ui_state().rename_file_input_value == "Justfile"

    def test_enter_file_rename_clears_draft(self, project_explorer):
        project_explorer.apply_actions([
            create_action(Name.RENAME_FILE_DRAFT_STATE, "src/index.ts"),
            create_action(Name.ENTER_RENAME_FILE_INPUT),
        ])

        ui_state = project_explorer.get_ui_state()
        assert ui_state.is_rename_file_input_visible is False
        assert ui_state.original_file_being_renamed == ""
        assert ui_state.rename_file_input_value == ""

    def test_folder_rename_flow(self, project_explorer):
        """Test that folder drafts keep the whole name and replace on typing."""
        project_explorer.apply_action(create_action(Name.RENAME_FOLDER_DRAFT_STATE, "src/utils"))
        ui_state = project_explorer.get_ui_state()
        assert ui_state.rename_folder_input_value == "utils"
        assert ui_state.is_rename_folder_input_visible is True

        project_explorer.apply_action(create_action(Name.TYPE_RENAME_FOLDER_INPUT, "helpers.v2"))
        assert ui_state.rename_folder_input_value == "helpers.v2"

        project_explorer.apply_action(create_action(Name.ENTER_RENAME_FOLDER_INPUT))
        assert ui_state.original_folder_being_renamed == ""
        assert ui_state.is_rename_folder_input_visible is False

    def test_file_and_folder_drafts_are_independent(self, project_explorer):
        """Test that a file draft never perturbs folder draft fields."""
        project_explorer.apply_actions([
            create_action(Name.RENAME_FOLDER_DRAFT_STATE, "src/utils"),
            create_action(Name.RENAME_FILE_DRAFT_STATE, "README.md"),
            create_action(Name.TYPE_RENAME_FILE_INPUT, "NOTES"),
            create_action(Name.ENTER_RENAME_FILE_INPUT),
        ])

        ui_state = project_explorer.get_ui_state()
        assert ui_state.original_folder_being_renamed == "src/utils"
        assert ui_state.rename_folder_input_value == "utils"
        assert ui_state.is_rename_folder_input_visible is True
