"""Response models for API endpoints."""

from pydantic import BaseModel
from typing import List, Optional


class TableSummary(BaseModel):
    """A parsed table and its selection state."""
    name: str
    columns: List[str]
    selected: bool


class WorkspaceResponse(BaseModel):
    """Current state of a session workspace."""
    session_id: str
    database_name: Optional[str] = None
    database_statements: List[str] = []
    split_mode: str
    tables: List[TableSummary] = []
    selected_count: int = 0


class GeneratedFunctions(BaseModel):
    """Functions generated for one table."""
    table: str
    key_column: Optional[str] = None
    insert_columns: List[str] = []
    update_columns: List[str] = []
    functions: List[str] = []


class GenerateResponse(BaseModel):
    """Result of module generation."""
    status: str  # "generated" | "nothing_to_generate"
    module_text: Optional[str] = None
    database_name: Optional[str] = None
    tables: List[str] = []
    functions: List[GeneratedFunctions] = []
