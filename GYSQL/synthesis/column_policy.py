"""Which columns act as key, insert arguments and update arguments.

Insert exclusion is deliberately narrow: only a column named exactly ``id``
or ending in ``_id`` is left out. A column such as ``identificador`` still
contains "id" and is still inserted.
"""

from __future__ import annotations

from typing import Callable, List, Optional, Sequence, Tuple


def _contains_id(column: str) -> bool:
    return "id" in column.lower()


def _is_id_or_fk(column: str) -> bool:
    lowered = column.lower()
    return lowered == "id" or lowered.endswith("_id")


def _is_literal_id(column: str) -> bool:
    return column == "id"


# Evaluated top to bottom; the first predicate with a match picks the key
KEY_RULES: Tuple[Callable[[str], bool], ...] = (
    _contains_id,
)

INSERT_EXCLUSIONS: Tuple[Callable[[str], bool], ...] = (
    _is_id_or_fk,
)

UPDATE_EXCLUSIONS: Tuple[Callable[[str], bool], ...] = (
    _is_literal_id,
)


def infer_key_column(columns: Sequence[str]) -> Optional[str]:
    """First id-like column; falls back to the first column. None only for no columns."""
    for rule in KEY_RULES:
        for column in columns:
            if rule(column):
                return column
    return columns[0] if columns else None


def insert_columns(columns: Sequence[str]) -> List[str]:
    return [
        column for column in columns
        if not any(excluded(column) for excluded in INSERT_EXCLUSIONS)
    ]


def update_columns(columns: Sequence[str]) -> List[str]:
    return [
        column for column in insert_columns(columns)
        if not any(excluded(column) for excluded in UPDATE_EXCLUSIONS)
    ]
