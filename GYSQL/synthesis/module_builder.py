"""Accumulates the parts of a generated module and renders them in order."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

_PART_SEPARATOR = "\n\n\n"


@dataclass
class TableSection:
    table: str
    text: str


@dataclass
class ModuleBuilder:
    """Preamble once, then one section per table, then the test driver and footer."""

    preamble: str = ""
    sections: List[TableSection] = field(default_factory=list)
    test_driver: str = ""
    footer: str = ""

    def add_section(self, table: str, text: str) -> None:
        self.sections.append(TableSection(table=table, text=text))

    @property
    def tables(self) -> List[str]:
        return [section.table for section in self.sections]

    def build(self) -> str:
        parts = [self.preamble]
        parts.extend(section.text for section in self.sections)
        parts.extend([self.test_driver, self.footer])
        text = _PART_SEPARATOR.join(part.strip("\n") for part in parts if part.strip())
        return text + "\n"
