"""DDL parsing."""

from .body_splitter import split_body, split_legacy, split_depth_aware
from .ddl_parser import (
    parse_tables,
    parse_script,
    extract_columns,
    extract_database_name,
    extract_database_statements,
    split_script,
    default_split_mode,
)

__all__ = [
    "split_body",
    "split_legacy",
    "split_depth_aware",
    "parse_tables",
    "parse_script",
    "extract_columns",
    "extract_database_name",
    "extract_database_statements",
    "split_script",
    "default_split_mode",
]
