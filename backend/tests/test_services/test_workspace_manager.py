"""Tests for WorkspaceManager."""

import pytest
from backend.utils.workspace_manager import WorkspaceManager
from GYSQL.utils.error_handling import UnknownTableError


def test_parse_into_new_session(sample_sql):
    """Test creating a workspace by parsing."""
    manager = WorkspaceManager()

    session_id = manager.parse_into(sample_sql, split_mode="legacy")

    workspace = manager.get_workspace(session_id)
    assert workspace is not None
    assert workspace["session_id"] == session_id
    assert workspace["sql"] == sample_sql
    assert "created_at" in workspace
    assert manager.get_registry(session_id).table_names() == ["usuarios", "pedidos"]


def test_get_nonexistent_workspace():
    manager = WorkspaceManager()
    assert manager.get_workspace("nonexistent") is None
    assert manager.get_registry("nonexistent") is None
    assert manager.toggle_all("nonexistent") is None
    assert manager.snapshot("nonexistent") is None


def test_reparse_keeps_created_at(workspace_manager, sample_sql, sample_session_id):
    workspace_manager.parse_into(sample_sql, session_id=sample_session_id)
    created_at = workspace_manager.get_workspace(sample_session_id)["created_at"]
    workspace_manager.toggle_all(sample_session_id)

    workspace_manager.parse_into("CREATE TABLE t (id INT);", session_id=sample_session_id)

    workspace = workspace_manager.get_workspace(sample_session_id)
    assert workspace["created_at"] == created_at
    assert workspace["registry"].table_names() == ["t"]
    assert workspace["registry"].selected_count() == 0


def test_toggle_selection(workspace_manager, sample_sql):
    session_id = workspace_manager.parse_into(sample_sql)
    registry = workspace_manager.toggle_selection(session_id, "usuarios")
    assert [t.name for t in registry.selected_tables()] == ["usuarios"]


def test_select_only_unknown_table(workspace_manager, sample_sql):
    session_id = workspace_manager.parse_into(sample_sql)
    with pytest.raises(UnknownTableError):
        workspace_manager.select_only(session_id, ["facturas"])


def test_snapshot_is_detached(workspace_manager, sample_sql):
    session_id = workspace_manager.parse_into(sample_sql)
    snapshot = workspace_manager.snapshot(session_id)
    workspace_manager.toggle_all(session_id)
    assert snapshot.selected_count() == 0


def test_delete_workspace(workspace_manager, sample_sql):
    session_id = workspace_manager.parse_into(sample_sql)
    assert workspace_manager.delete_workspace(session_id) is True
    assert workspace_manager.delete_workspace(session_id) is False
