"""DDL parsing: recover table models and the database name from SQL text.

The parser is pattern driven. It does not validate SQL; statements it cannot
match are silently skipped, and a script without any ``CREATE TABLE`` yields
an empty result rather than an error.
"""

from __future__ import annotations

import re
from typing import Callable, Dict, List, Optional, Tuple

from GYSQL.config import get_config
from GYSQL.ir.models import ParseResult, SplitMode, TableModel
from GYSQL.parsing.body_splitter import split_body
from GYSQL.utils.logging import get_logger

logger = get_logger(__name__)


CREATE_TABLE_PATTERN = re.compile(
    r"CREATE\s+TABLE\s+(?:IF\s+NOT\s+EXISTS\s+)?"
    r"(?P<name>[`\"\[]?[\w.]+[`\"\]]?)\s*"
    r"\((?P<body>.*?)\)\s*;",
    re.IGNORECASE | re.DOTALL,
)

CREATE_DATABASE_LINE = re.compile(
    r"^\s*CREATE\s+DATABASE\b(?:\s+IF\s+NOT\s+EXISTS\b)?(?P<rest>[^;]*)",
    re.IGNORECASE,
)

DATABASE_STATEMENT_LINE = re.compile(r"^\s*(?:CREATE\s+DATABASE\b|USE\s)", re.IGNORECASE)

# Keyword must stand alone: "checksum" or "unique_code" are column names
TABLE_CONSTRAINT_HEAD = re.compile(
    r"\s*(?:PRIMARY\s+KEY|UNIQUE|CHECK|CONSTRAINT)\b", re.IGNORECASE
)


def _is_foreign_key(segment: str) -> bool:
    return "FOREIGN KEY" in segment.upper()


def _is_table_constraint(segment: str) -> bool:
    return TABLE_CONSTRAINT_HEAD.match(segment) is not None


# Segments matching any filter of the active mode never become columns
CONSTRAINT_FILTERS: Dict[str, Tuple[Callable[[str], bool], ...]] = {
    "legacy": (_is_foreign_key,),
    "depth_aware": (_is_foreign_key, _is_table_constraint),
}


def default_split_mode() -> SplitMode:
    """Split mode configured under ``parser.split_mode`` (legacy if unset)."""
    mode = (get_config("parser") or {}).get("split_mode", "legacy")
    return mode if mode in CONSTRAINT_FILTERS else "legacy"


def extract_columns(body: str, split_mode: SplitMode = "legacy") -> List[str]:
    """Column names declared in a table body, in declaration order."""
    segments = split_body(body, split_mode)
    filters = CONSTRAINT_FILTERS[split_mode]
    columns = []
    for segment in segments:
        if any(is_constraint(segment) for is_constraint in filters):
            continue
        columns.append(segment.split()[0])
    return columns


def parse_tables(sql_text: str, split_mode: SplitMode = "legacy") -> Tuple[TableModel, ...]:
    """
    Parse every ``CREATE TABLE name ( ... );`` statement in ``sql_text``.

    Args:
        sql_text: Raw SQL script
        split_mode: "legacy" (plain comma split) or "depth_aware"

    Returns:
        Table models in statement order, all unselected. Empty when nothing matches.

    Example:
        >>> tables = parse_tables("CREATE TABLE t (id SERIAL, nombre TEXT);")
        >>> tables[0].name, tables[0].columns
        ('t', ('id', 'nombre'))
    """
    if not sql_text:
        return ()

    tables = []
    for match in CREATE_TABLE_PATTERN.finditer(sql_text):
        name = match.group("name")
        columns = extract_columns(match.group("body"), split_mode)
        if not columns:
            logger.debug(f"Table {name}: no column declarations recovered")
        tables.append(TableModel(name=name, columns=columns))

    logger.debug(f"Parsed {len(tables)} table(s) with split_mode={split_mode}")
    return tuple(tables)


def extract_database_name(sql_text: str) -> Optional[str]:
    """
    Database name from the first line starting with ``CREATE DATABASE``.

    The name is the text after the keyword up to ``;`` or end of line. Only the
    first such line counts; if it carries no name, None is returned.
    """
    for line in (sql_text or "").splitlines():
        match = CREATE_DATABASE_LINE.match(line)
        if match:
            name = match.group("rest").strip()
            return name or None
    return None


def extract_database_statements(sql_text: str) -> List[str]:
    """All ``CREATE DATABASE`` / ``USE`` lines, trimmed, in order."""
    return [
        line.strip()
        for line in (sql_text or "").splitlines()
        if DATABASE_STATEMENT_LINE.match(line)
    ]


def split_script(sql_text: str) -> Tuple[List[str], str]:
    """
    Separate database-lifecycle lines from the rest of a script.

    Returns:
        (database statements, remaining script text)
    """
    database_statements = []
    remaining = []
    for line in (sql_text or "").splitlines():
        if DATABASE_STATEMENT_LINE.match(line):
            database_statements.append(line.strip())
        else:
            remaining.append(line)
    return database_statements, "\n".join(remaining)


def parse_script(sql_text: str, split_mode: Optional[SplitMode] = None) -> ParseResult:
    """Parse tables, database name and database statements in one pass."""
    mode = split_mode or default_split_mode()
    tables = parse_tables(sql_text, mode)
    result = ParseResult(
        tables=tables,
        database_name=extract_database_name(sql_text),
        database_statements=tuple(extract_database_statements(sql_text)),
        split_mode=mode,
    )
    logger.info(
        f"Parsed script: {len(result.tables)} table(s), "
        f"database={result.database_name or '-'}, split_mode={mode}"
    )
    return result
