"""Splitting of a ``CREATE TABLE`` body into declaration segments.

Two strategies are available:

- legacy: a plain ``str.split(",")``. Commas inside ``DECIMAL(10,2)`` or a
  composite key clause become segment boundaries. This is what the editor
  has always done and it stays the default.
- depth_aware: a small scanner that tracks parenthesis depth and quoted
  literals, so only top-level commas separate declarations.
"""

from __future__ import annotations

from typing import Callable, Dict, List

from GYSQL.ir.models import SplitMode


_OPENING = "("
_CLOSING = ")"
_QUOTES = ("'", '"', "`")


def split_legacy(body: str) -> List[str]:
    """Split on every comma, trim, drop empty segments."""
    return [segment.strip() for segment in body.split(",") if segment.strip()]


def split_depth_aware(body: str) -> List[str]:
    """Split on commas at parenthesis depth zero, outside quoted literals.

    Unbalanced closing parentheses never drive the depth below zero, so a
    stray ``)`` degrades to legacy-like behaviour instead of swallowing the
    rest of the body.
    """
    segments: List[str] = []
    current: List[str] = []
    depth = 0
    quote = None

    i = 0
    while i < len(body):
        char = body[i]

        if quote is not None:
            current.append(char)
            if char == quote:
                # Doubled quote is an escaped quote inside the literal
                if i + 1 < len(body) and body[i + 1] == quote:
                    current.append(body[i + 1])
                    i += 1
                else:
                    quote = None
        elif char in _QUOTES:
            quote = char
            current.append(char)
        elif char == _OPENING:
            depth += 1
            current.append(char)
        elif char == _CLOSING:
            depth = max(depth - 1, 0)
            current.append(char)
        elif char == "," and depth == 0:
            segments.append("".join(current))
            current = []
        else:
            current.append(char)
        i += 1

    segments.append("".join(current))
    return [segment.strip() for segment in segments if segment.strip()]


SPLITTERS: Dict[str, Callable[[str], List[str]]] = {
    "legacy": split_legacy,
    "depth_aware": split_depth_aware,
}


def split_body(body: str, split_mode: SplitMode = "legacy") -> List[str]:
    """Split a table body with the requested strategy."""
    try:
        splitter = SPLITTERS[split_mode]
    except KeyError:
        raise ValueError(
            f"Unknown split mode '{split_mode}'. Expected one of: {', '.join(SPLITTERS)}"
        ) from None
    return splitter(body)
