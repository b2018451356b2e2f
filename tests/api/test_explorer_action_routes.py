"""Integration tests for the explorer mutation endpoints.

Covers POST /explorer/actions, GET /explorer/history, POST /explorer/reset
and POST /explorer/restore.
"""

from models.action_catalog import ExplorerActionName as Name


def action(name: Name, value: str = "") -> dict:
    """Build the JSON form of an action."""
    return {"name": name.value, "value": value}


class TestApplyActions:
    """Tests for POST /explorer/actions."""

    def test_apply_actions_mutates_shared_explorer(self, client_with_explorer):
        """Test that a batch is applied in order to the injected explorer."""
        client, session = client_with_explorer

        response = client.post(
            "/explorer/actions",
            json={
                "actions": [
                    action(Name.CREATE_FOLDER, "src"),
                    action(Name.CREATE_FILE, "src/index.ts"),
                    action(Name.SET_FILE_CONTENTS, "src/index.ts;console.log(1);"),
                ]
            },
        )

        assert response.status_code == 200
        assert response.json() == {"applied": 3, "history_length": 3}
        assert session.explorer.get_file_contents("src/index.ts") == "console.log(1);"

    def test_history_length_accumulates(self, client_with_explorer):
        """Test that history_length counts every batch so far."""
        client, _ = client_with_explorer

        client.post("/explorer/actions", json={"actions": [action(Name.CREATE_FILE, "a.ts")]})
        response = client.post(
            "/explorer/actions",
            json={"actions": [action(Name.CREATE_FILE, "b.ts"), action(Name.SHOW_CONTEXT_MENU)]},
        )

        assert response.json() == {"applied": 2, "history_length": 3}

    def test_value_is_optional(self, client_with_explorer):
        """Test that actions without a value default to ""."""
        client, session = client_with_explorer

        response = client.post(
            "/explorer/actions",
            json={"actions": [{"name": Name.SHOW_CONTEXT_MENU.value}]},
        )

        assert response.status_code == 200
        assert session.explorer.get_ui_state().is_file_explorer_context_menu_open is True

    def test_missing_name_is_rejected(self, client_with_explorer):
        """Test that an action without a name fails request validation."""
        client, session = client_with_explorer

        response = client.post("/explorer/actions", json={"actions": [{"value": "a.ts"}]})

        assert response.status_code == 422
        assert session.explorer.get_actions_applied() == []

    def test_strict_open_missing_returns_404(self, client_with_explorer):
        """Test that a strict-mode open of a missing file maps to 404."""
        client, session = client_with_explorer

        response = client.post(
            "/explorer/actions",
            json={
                "actions": [
                    action(Name.CREATE_FILE, "a.ts"),
                    action(Name.OPEN_FILE, "ghost.ts"),
                    action(Name.CREATE_FILE, "b.ts"),
                ]
            },
        )

        assert response.status_code == 404
        data = response.json()
        assert data["error"] == "Path Not Found"
        assert data["detail"] == "File not found: ghost.ts"
        assert data["path"] == "ghost.ts"
        assert session.explorer.get_files() == ["/a.ts"]
        assert len(session.explorer.get_actions_applied()) == 2

    def test_strict_open_directory_returns_400(self, client_with_explorer):
        """Test that opening a folder maps to 400."""
        client, _ = client_with_explorer

        response = client.post(
            "/explorer/actions",
            json={"actions": [action(Name.CREATE_FOLDER, "src"), action(Name.OPEN_FILE, "src")]},
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Cannot open a directory: src"


class TestHistory:
    """Tests for GET /explorer/history."""

    def test_history_lists_actions_in_order(self, client_with_explorer):
        client, _ = client_with_explorer
        client.post(
            "/explorer/actions",
            json={"actions": [action(Name.CREATE_FILE, "a.ts"), action(Name.DELETE_FILE, "a.ts")]},
        )

        response = client.get("/explorer/history")

        assert response.status_code == 200
        data = response.json()
        assert data["count"] == 2
        assert data["actions"] == [
            {"name": "file-explorer-create-file", "value": "a.ts"},
            {"name": "file-explorer-delete-file", "value": "a.ts"},
        ]


class TestReset:
    """Tests for POST /explorer/reset."""

    def test_reset_clears_explorer(self, client_with_explorer):
        client, session = client_with_explorer
        client.post("/explorer/actions", json={"actions": [action(Name.CREATE_FILE, "a.ts")]})

        response = client.post("/explorer/reset")

        assert response.status_code == 200
        assert response.json() == {"actions": [], "count": 0}
        assert session.explorer.get_files() == []
        assert session.explorer.get_actions_applied() == []


class TestRestore:
    """Tests for POST /explorer/restore."""

    def test_restore_round_trips_snapshot(self, client_with_explorer):
        """Test that restoring a captured snapshot brings the tree back."""
        client, session = client_with_explorer
        client.post(
            "/explorer/actions",
            json={
                "actions": [
                    action(Name.CREATE_FILE, "src/a.ts"),
                    action(Name.OPEN_FILE, "src/a.ts"),
                    action(Name.SET_PRESENT_WORKING_DIRECTORY, "src"),
                ]
            },
        )
        snapshot = client.get("/explorer/snapshot").json()
        client.post("/explorer/reset")

        response = client.post("/explorer/restore", json=snapshot)

        assert response.status_code == 200
        assert response.json() == snapshot
        assert session.explorer.get_files() == ["/src/a.ts"]
        assert session.explorer.get_open_files() == ["src/a.ts"]
        assert session.explorer.get_present_working_directory() == "src"
        assert session.explorer.get_actions_applied() == []

    def test_restore_keeps_configuration(self, client_with_explorer):
        """Test that the restored explorer keeps strictness."""
        client, session = client_with_explorer
        session.explorer.strict = False

        client.post("/explorer/restore", json={"file_structure": {}})

        assert session.explorer.strict is False

    def test_restore_rejects_bad_node_type(self, client_with_explorer):
        client, _ = client_with_explorer

        response = client.post(
            "/explorer/restore",
            json={"file_structure": {"x": {"type": "symlink"}}},
        )

        assert response.status_code == 422
