"""Module generation endpoint."""

import logging
from fastapi import APIRouter, Depends, HTTPException

from backend.models.requests import GenerateRequest
from backend.models.responses import GenerateResponse
from backend.dependencies import get_workspace_manager, get_generation_service
from backend.utils.workspace_manager import WorkspaceManager
from backend.services.generation_service import GenerationService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/schema", tags=["generation"])


@router.post("/{session_id}/generate", response_model=GenerateResponse)
async def generate_module(
    session_id: str,
    request: GenerateRequest,
    workspace_manager: WorkspaceManager = Depends(get_workspace_manager),
    generation_service: GenerationService = Depends(get_generation_service),
):
    """
    Generate the data-access module for the session's selected tables.

    With nothing selected the response status is "nothing_to_generate" and
    module_text is null. Unknown names in ``tables`` are rejected with 400.
    """
    response = await generation_service.generate(
        workspace_manager,
        session_id,
        database_name=request.database_name,
        tables=request.tables,
    )
    if response is None:
        raise HTTPException(status_code=404, detail="Session not found")
    return response
