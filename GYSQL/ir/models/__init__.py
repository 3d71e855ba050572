"""IR (Intermediate Representation) models."""

from .schema import (
    SplitMode,
    TableModel,
    ParseResult,
    TableFunctions,
    ModuleSynthesisOutput,
)

__all__ = [
    "SplitMode",
    "TableModel",
    "ParseResult",
    "TableFunctions",
    "ModuleSynthesisOutput",
]
