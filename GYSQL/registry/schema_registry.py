"""Schema registry: parsed tables plus per-table selection state."""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Tuple

from GYSQL.ir.models import ParseResult, SplitMode, TableModel
from GYSQL.parsing import parse_script
from GYSQL.utils.error_handling import UnknownTableError
from GYSQL.utils.logging import get_logger

logger = get_logger(__name__)


class SchemaRegistry:
    """Holds the table models of one parse and tracks which are selected.

    Selection order is the declaration order of the tables in the script.
    """

    def __init__(self, parse_result: Optional[ParseResult] = None):
        self._result = parse_result or ParseResult()

    @classmethod
    def from_sql(cls, sql_text: str, split_mode: Optional[SplitMode] = None) -> "SchemaRegistry":
        """Build a registry by parsing ``sql_text``."""
        return cls(parse_script(sql_text, split_mode))

    def reload(self, sql_text: str, split_mode: Optional[SplitMode] = None) -> None:
        """Replace the whole table set; every table starts unselected."""
        self._result = parse_script(sql_text, split_mode or self._result.split_mode)
        logger.debug(f"Registry reloaded with {len(self._result.tables)} table(s)")

    @property
    def tables(self) -> Tuple[TableModel, ...]:
        return self._result.tables

    @property
    def database_name(self) -> Optional[str]:
        return self._result.database_name

    @property
    def database_statements(self) -> Tuple[str, ...]:
        return self._result.database_statements

    @property
    def split_mode(self) -> SplitMode:
        return self._result.split_mode

    def table_names(self) -> List[str]:
        return [table.name for table in self.tables]

    def get_table(self, table_name: str) -> Optional[TableModel]:
        for table in self.tables:
            if table.name == table_name:
                return table
        return None

    def toggle_selection(self, table_name: str) -> None:
        """Flip ``selected`` for the named table; unknown names are ignored."""
        table = self.get_table(table_name)
        if table is None:
            logger.debug(f"toggle_selection: table '{table_name}' not in registry")
            return
        table.selected = not table.selected

    def toggle_all(self) -> None:
        """Select all tables, or deselect all when every table is already selected."""
        if not self.tables:
            return
        target = not all(table.selected for table in self.tables)
        for table in self.tables:
            table.selected = target

    def select_only(self, table_names: Iterable[str]) -> None:
        """
        Make exactly ``table_names`` selected.

        Raises:
            UnknownTableError: If any name is not in the registry. Selection is
                left untouched in that case.
        """
        wanted = list(table_names)
        known = set(self.table_names())
        unknown = [name for name in wanted if name not in known]
        if unknown:
            raise UnknownTableError(unknown, known_tables=self.table_names())

        wanted_set = set(wanted)
        for table in self.tables:
            table.selected = table.name in wanted_set

    def clear_selection(self) -> None:
        for table in self.tables:
            table.selected = False

    def selected_tables(self) -> Tuple[TableModel, ...]:
        return tuple(table for table in self.tables if table.selected)

    def selected_count(self) -> int:
        return len(self.selected_tables())

    def snapshot(self) -> "SchemaRegistry":
        """Independent copy; selection changes on either side do not leak."""
        result = self._result.model_copy(
            update={"tables": tuple(table.model_copy() for table in self.tables)}
        )
        return SchemaRegistry(result)

    def summary(self) -> Dict[str, object]:
        return {
            "database_name": self.database_name,
            "database_statements": list(self.database_statements),
            "split_mode": self.split_mode,
            "tables": [table.to_summary() for table in self.tables],
            "selected_count": self.selected_count(),
        }

    def __len__(self) -> int:
        return len(self.tables)

    def __contains__(self, table_name: object) -> bool:
        return isinstance(table_name, str) and self.get_table(table_name) is not None
