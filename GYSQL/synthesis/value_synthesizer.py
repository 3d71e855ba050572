"""Heuristic example values for generated test data.

A column name is matched against an ordered rule table; the first rule whose
keywords appear in the lower-cased name decides the literal. The order is
part of the contract: ``fecha_nombre`` resolves to a name, not a date.
Literals are Python source text, ready to be pasted into generated code.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class ValueRule:
    kind: str
    keywords: Tuple[str, ...]
    literal: str

    def matches(self, column_name: str) -> bool:
        lowered = column_name.lower()
        return any(keyword in lowered for keyword in self.keywords)


VALUE_RULES: Tuple[ValueRule, ...] = (
    ValueRule("name", ("nombre", "name"), '"Juan Pérez"'),
    ValueRule("age", ("edad", "age"), "25"),
    ValueRule("email", ("email", "correo"), '"juan@example.com"'),
    ValueRule("active", ("activo", "active"), "True"),
    ValueRule("date", ("fecha", "date"), '"2024-01-15"'),
    ValueRule("price", ("precio", "price"), "99.99"),
    ValueRule("phone", ("telefono", "phone"), '"555-123-4567"'),
    ValueRule("text", ("texto", "text", "string"), '"Texto de ejemplo"'),
    ValueRule("number", ("numero", "num", "int"), "42"),
    ValueRule("boolean", ("logico", "bool"), "True"),
)

DEFAULT_RULE = ValueRule("default", (), '"valor_ejemplo"')


def match_value_rule(column_name: str) -> ValueRule:
    """First rule matching ``column_name``, or the default rule."""
    for rule in VALUE_RULES:
        if rule.matches(column_name):
            return rule
    return DEFAULT_RULE


def synthesize_value(column_name: str) -> str:
    """Example literal for ``column_name`` (never fails)."""
    return match_value_rule(column_name).literal
