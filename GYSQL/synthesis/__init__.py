"""Code synthesis: heuristic values, column policy and module generation."""

from .value_synthesizer import VALUE_RULES, DEFAULT_RULE, ValueRule, match_value_rule, synthesize_value
from .column_policy import infer_key_column, insert_columns, update_columns
from .config import SynthesisConfig
from .module_builder import ModuleBuilder, TableSection
from .code_generator import synthesize_module, synthesize_from_registry, plan_tables

__all__ = [
    "VALUE_RULES",
    "DEFAULT_RULE",
    "ValueRule",
    "match_value_rule",
    "synthesize_value",
    "infer_key_column",
    "insert_columns",
    "update_columns",
    "SynthesisConfig",
    "ModuleBuilder",
    "TableSection",
    "synthesize_module",
    "synthesize_from_registry",
    "plan_tables",
]
