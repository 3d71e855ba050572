"""Intermediate Representation (IR) models."""

from .models import (
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
