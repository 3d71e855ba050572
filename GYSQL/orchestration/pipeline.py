"""Parse, select and synthesize in a single call."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from GYSQL.ir.models import ModuleSynthesisOutput, SplitMode
from GYSQL.registry import SchemaRegistry
from GYSQL.synthesis import SynthesisConfig, synthesize_from_registry
from GYSQL.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class PipelineResult:
    registry: SchemaRegistry
    output: ModuleSynthesisOutput

    @property
    def module_text(self) -> Optional[str]:
        return self.output.module_text


def run_pipeline(
    sql_text: str,
    selected: Optional[Iterable[str]] = None,
    select_all: bool = False,
    database_name: Optional[str] = None,
    split_mode: Optional[SplitMode] = None,
    config: Optional[SynthesisConfig] = None,
) -> PipelineResult:
    """
    Run the whole pipeline over one SQL script.

    Args:
        sql_text: Script with CREATE TABLE / CREATE DATABASE statements
        selected: Explicit table names to generate (raises UnknownTableError
            for names that were not parsed)
        select_all: Select every parsed table; ignored when ``selected`` is given
        database_name: Override for the parsed database name
        split_mode: Body split strategy (config default when None)
        config: Synthesis settings (config.yaml when None)

    Returns:
        PipelineResult with the registry and the synthesis output
    """
    registry = SchemaRegistry.from_sql(sql_text, split_mode)

    if selected is not None:
        registry.select_only(selected)
    elif select_all:
        registry.toggle_all()

    logger.info(f"Pipeline: {registry.selected_count()}/{len(registry)} table(s) selected")
    output = synthesize_from_registry(registry, database_name=database_name, config=config)
    return PipelineResult(registry=registry, output=output)
