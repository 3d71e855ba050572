"""Pydantic models for parsed DDL and synthesized modules.

Table models are produced only by the DDL parser. Their name and column list
are frozen; the ``selected`` flag is the only state the caller may change.
"""

from __future__ import annotations

from typing import Dict, List, Literal, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field


SplitMode = Literal["legacy", "depth_aware"]


class TableModel(BaseModel):
    """One parsed ``CREATE TABLE`` statement."""

    name: str = Field(frozen=True, description="Table identifier as written in the DDL")
    columns: Tuple[str, ...] = Field(
        default=(),
        frozen=True,
        description="Column names in declaration order (duplicates preserved)",
    )
    selected: bool = Field(default=False, description="Whether the table is selected for generation")

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    def to_summary(self) -> Dict[str, object]:
        """Plain dict used by API responses."""
        return {"name": self.name, "columns": list(self.columns), "selected": self.selected}


class ParseResult(BaseModel):
    """Everything recovered from one SQL script."""

    tables: Tuple[TableModel, ...] = ()
    database_name: Optional[str] = None
    database_statements: Tuple[str, ...] = ()
    split_mode: SplitMode = "legacy"

    model_config = ConfigDict(extra="forbid")

    @property
    def table_names(self) -> List[str]:
        return [table.name for table in self.tables]


class TableFunctions(BaseModel):
    """Names of the functions generated for one table."""

    table: str
    list_all: str
    get_by_id: str
    insert: str
    update: str
    delete: str
    key_column: Optional[str] = None
    insert_columns: List[str] = Field(default_factory=list)
    update_columns: List[str] = Field(default_factory=list)

    def names(self) -> List[str]:
        return [self.list_all, self.get_by_id, self.insert, self.update, self.delete]


class ModuleSynthesisOutput(BaseModel):
    """Output structure for module synthesis."""

    status: Literal["generated", "nothing_to_generate"]
    module_text: Optional[str] = None
    database_name: Optional[str] = None
    tables: List[str] = Field(default_factory=list)
    functions: List[TableFunctions] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")

    @property
    def generated(self) -> bool:
        return self.status == "generated"
