"""Schema workspace endpoints: parse and table selection."""

import logging
from fastapi import APIRouter, Depends, HTTPException

from backend.config import settings
from backend.models.requests import ParseRequest, ToggleRequest
from backend.models.responses import WorkspaceResponse, TableSummary
from backend.dependencies import get_workspace_manager
from backend.utils.workspace_manager import WorkspaceManager
from GYSQL.registry import SchemaRegistry

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/schema", tags=["schema"])


def _workspace_response(session_id: str, registry: SchemaRegistry) -> WorkspaceResponse:
    return WorkspaceResponse(
        session_id=session_id,
        database_name=registry.database_name,
        database_statements=list(registry.database_statements),
        split_mode=registry.split_mode,
        tables=[TableSummary(**table.to_summary()) for table in registry.tables],
        selected_count=registry.selected_count(),
    )


def _require_registry(workspace_manager: WorkspaceManager, session_id: str) -> SchemaRegistry:
    registry = workspace_manager.get_registry(session_id)
    if registry is None:
        raise HTTPException(status_code=404, detail="Session not found")
    return registry


@router.post("/parse", response_model=WorkspaceResponse)
async def parse_schema(
    request: ParseRequest,
    workspace_manager: WorkspaceManager = Depends(get_workspace_manager),
):
    """
    Parse a SQL script into a session workspace.

    Re-parsing an existing session replaces its table set and clears the
    selection. A script without CREATE TABLE statements is not an error; the
    workspace simply has no tables.
    """
    session_id = workspace_manager.parse_into(
        request.sql,
        session_id=request.session_id,
        split_mode=request.split_mode or settings.default_split_mode,
    )
    registry = _require_registry(workspace_manager, session_id)
    logger.info(f"Session {session_id}: parsed {len(registry)} table(s)")
    return _workspace_response(session_id, registry)


@router.get("/{session_id}", response_model=WorkspaceResponse)
async def get_workspace(
    session_id: str,
    workspace_manager: WorkspaceManager = Depends(get_workspace_manager),
):
    """Current tables and selection of a session."""
    registry = _require_registry(workspace_manager, session_id)
    return _workspace_response(session_id, registry)


@router.post("/{session_id}/toggle", response_model=WorkspaceResponse)
async def toggle_table(
    session_id: str,
    request: ToggleRequest,
    workspace_manager: WorkspaceManager = Depends(get_workspace_manager),
):
    """Flip the selection of one table; unknown table names are ignored."""
    registry = workspace_manager.toggle_selection(session_id, request.table_name)
    if registry is None:
        raise HTTPException(status_code=404, detail="Session not found")
    return _workspace_response(session_id, registry)


@router.post("/{session_id}/toggle_all", response_model=WorkspaceResponse)
async def toggle_all_tables(
    session_id: str,
    workspace_manager: WorkspaceManager = Depends(get_workspace_manager),
):
    """Select every table, or clear the selection when all are selected."""
    registry = workspace_manager.toggle_all(session_id)
    if registry is None:
        raise HTTPException(status_code=404, detail="Session not found")
    return _workspace_response(session_id, registry)


@router.delete("/{session_id}")
async def delete_workspace(
    session_id: str,
    workspace_manager: WorkspaceManager = Depends(get_workspace_manager),
):
    """Drop a session workspace."""
    if not workspace_manager.delete_workspace(session_id):
        raise HTTPException(status_code=404, detail="Session not found")
    return {"status": "deleted", "session_id": session_id}
