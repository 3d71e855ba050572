"""Generation service - runs code synthesis over a session's selected tables."""

import asyncio
import logging
from typing import List, Optional

from backend.models.responses import GenerateResponse, GeneratedFunctions
from backend.utils.workspace_manager import WorkspaceManager
from GYSQL.synthesis import SynthesisConfig, synthesize_from_registry

logger = logging.getLogger(__name__)


class GenerationService:
    """Synthesizes the data-access module for a workspace."""

    def __init__(self, staging_delay_seconds: float = 0.0, config: Optional[SynthesisConfig] = None):
        self.staging_delay_seconds = staging_delay_seconds
        self.config = config

    async def generate(
        self,
        workspace_manager: WorkspaceManager,
        session_id: str,
        database_name: Optional[str] = None,
        tables: Optional[List[str]] = None,
    ) -> Optional[GenerateResponse]:
        """
        Generate for the session's selection.

        Returns None if the session does not exist. Raises UnknownTableError
        when ``tables`` names a table that was not parsed.
        """
        if tables is not None:
            if workspace_manager.select_only(session_id, tables) is None:
                return None

        registry = workspace_manager.snapshot(session_id)
        if registry is None:
            return None

        if self.staging_delay_seconds > 0:
            await asyncio.sleep(self.staging_delay_seconds)

        output = synthesize_from_registry(
            registry,
            database_name=database_name,
            config=self.config or SynthesisConfig.from_config(),
        )
        logger.info(
            f"Session {session_id}: generation status={output.status}, tables={output.tables}"
        )

        return GenerateResponse(
            status=output.status,
            module_text=output.module_text,
            database_name=output.database_name,
            tables=output.tables,
            functions=[
                GeneratedFunctions(
                    table=item.table,
                    key_column=item.key_column,
                    insert_columns=item.insert_columns,
                    update_columns=item.update_columns,
                    functions=item.names(),
                )
                for item in output.functions
            ],
        )
