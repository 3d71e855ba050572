"""FastAPI dependencies - process-wide singletons."""

from functools import lru_cache
from backend.config import settings
from backend.utils.workspace_manager import WorkspaceManager
from backend.services.generation_service import GenerationService


# Process-wide singletons (single process, in-memory workspaces)
@lru_cache(maxsize=1)
def get_workspace_manager() -> WorkspaceManager:
    """Singleton WorkspaceManager - shared across all requests."""
    return WorkspaceManager()


@lru_cache(maxsize=1)
def get_generation_service() -> GenerationService:
    """Singleton GenerationService."""
    return GenerationService(staging_delay_seconds=settings.staging_delay_seconds)
