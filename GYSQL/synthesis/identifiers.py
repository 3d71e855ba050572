"""Turn SQL identifiers into names usable in generated Python code."""

from __future__ import annotations

import keyword
import re
from typing import Iterable, List

_QUOTE_CHARS = "`\"[]"
_NON_WORD = re.compile(r"\W+")


def strip_quotes(identifier: str) -> str:
    return identifier.strip(_QUOTE_CHARS)


def is_quoted(identifier: str) -> bool:
    return len(identifier) > 1 and identifier[0] in _QUOTE_CHARS and identifier[-1] in _QUOTE_CHARS


def python_identifier(identifier: str, lower: bool = False) -> str:
    """Valid, non-keyword Python identifier derived from a SQL identifier."""
    name = _NON_WORD.sub("_", strip_quotes(identifier)).strip("_")
    if lower:
        name = name.lower()
    if not name:
        name = "col"
    if name[0].isdigit():
        name = f"_{name}"
    if keyword.iskeyword(name) or keyword.issoftkeyword(name):
        name = f"{name}_"
    return name


def unique_identifiers(names: Iterable[str], taken: Iterable[str] = ()) -> List[str]:
    """Suffix repeated names with ``_2``, ``_3``... keeping the first as-is."""
    seen = set(taken)
    result = []
    for name in names:
        candidate = name
        counter = 2
        while candidate in seen:
            candidate = f"{name}_{counter}"
            counter += 1
        seen.add(candidate)
        result.append(candidate)
    return result


def row_key(column: str) -> str:
    """Key under which PostgreSQL reports ``column`` in a result row.

    Unquoted identifiers are folded to lower case by the server.
    """
    if is_quoted(column):
        return strip_quotes(column)
    return column.lower()
