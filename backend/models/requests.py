"""Request models for API endpoints."""

from pydantic import BaseModel, Field
from typing import List, Literal, Optional


class ParseRequest(BaseModel):
    """Request to parse a SQL script into a session workspace."""
    sql: str = Field(..., description="SQL script produced by the grammar service")
    session_id: Optional[str] = Field(
        None,
        pattern=r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$",
        description="Existing session to replace; a new one is created when omitted",
    )
    split_mode: Optional[Literal["legacy", "depth_aware"]] = None


class ToggleRequest(BaseModel):
    """Request to flip the selection of one table."""
    table_name: str = Field(..., min_length=1)


class GenerateRequest(BaseModel):
    """Request to generate the data-access module."""
    database_name: Optional[str] = Field(None, description="Overrides the parsed database name")
    tables: Optional[List[str]] = Field(
        None,
        description="Explicit selection; replaces the session's current selection when given",
    )
