"""Code synthesis: selected table models to one Python data-access module.

Deterministic transformation. For fixed tables, columns and database name the
output is byte-identical; timestamps only appear in progress labels that the
generated script computes at run time.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional, Sequence

from GYSQL.ir.models import ModuleSynthesisOutput, TableFunctions, TableModel
from GYSQL.synthesis import templates
from GYSQL.synthesis.column_policy import infer_key_column, insert_columns, update_columns
from GYSQL.synthesis.config import SynthesisConfig
from GYSQL.synthesis.identifiers import python_identifier, row_key, strip_quotes, unique_identifiers
from GYSQL.synthesis.module_builder import ModuleBuilder
from GYSQL.synthesis.value_synthesizer import synthesize_value
from GYSQL.utils.logging import get_logger

if TYPE_CHECKING:
    from GYSQL.registry import SchemaRegistry

logger = get_logger(__name__)

# Column used in SQL and parameters when a table declared no columns at all
PLACEHOLDER_KEY_COLUMN = "id"

_UNSAFE_LABEL_CHARS = re.compile(r"[^\w.\-]")

# Names the generated function bodies rely on; parameters must not shadow them
RESERVED_NAMES = frozenset({
    "sql", "conn", "cur", "row", "rows", "error", "deleted",
    "psycopg2", "get_connection", "get_pool", "close_pool", "run_query",
    "datetime", "print", "len",
})


@dataclass(frozen=True)
class TablePlan:
    """Everything needed to render one table's section and check."""
    table: TableModel
    display_name: str
    functions: TableFunctions
    check_function: str
    key_column: str
    key_param: str
    insert_columns: List[str]
    insert_params: List[str]
    update_columns: List[str]
    update_params: List[str]


def _label(value: str) -> str:
    """Text safe to embed in generated docstrings and f-strings."""
    return _UNSAFE_LABEL_CHARS.sub("", strip_quotes(value)) or "?"


def _py_str(value: str) -> str:
    """Double-quoted Python string literal."""
    return json.dumps(value, ensure_ascii=False)


def _tuple_literal(names: Sequence[str]) -> str:
    if len(names) == 1:
        return f"({names[0]},)"
    return f"({', '.join(names)})"


def _params_for(columns: Sequence[str]) -> List[str]:
    return unique_identifiers(
        [python_identifier(column) for column in columns],
        taken=RESERVED_NAMES,
    )


def plan_table(table: TableModel, base_name: str) -> TablePlan:
    """Resolve key, argument lists and function names for one table."""
    columns = list(table.columns)
    key_column = infer_key_column(columns) or PLACEHOLDER_KEY_COLUMN

    to_insert = insert_columns(columns)
    to_update = update_columns(columns)
    insert_params = _params_for(to_insert)
    update_params = _params_for(to_update)

    key_param = python_identifier(key_column)
    if key_param in update_params or key_param in RESERVED_NAMES:
        key_param = unique_identifiers(
            [f"current_{key_param}"], taken=set(update_params) | RESERVED_NAMES
        )[0]

    functions = TableFunctions(
        table=table.name,
        list_all=f"get_all_{base_name}",
        get_by_id=f"get_{base_name}_by_id",
        insert=f"insert_{base_name}",
        update=f"update_{base_name}",
        delete=f"delete_{base_name}",
        key_column=key_column,
        insert_columns=to_insert,
        update_columns=to_update,
    )

    return TablePlan(
        table=table,
        display_name=_label(table.name),
        functions=functions,
        check_function=f"check_{base_name}",
        key_column=key_column,
        key_param=key_param,
        insert_columns=to_insert,
        insert_params=insert_params,
        update_columns=to_update,
        update_params=update_params,
    )


def plan_tables(tables: Sequence[TableModel]) -> List[TablePlan]:
    base_names = unique_identifiers(python_identifier(table.name, lower=True) for table in tables)
    return [plan_table(table, base_name) for table, base_name in zip(tables, base_names)]


def render_preamble(database_name: str, table_names: Sequence[str], config: SynthesisConfig) -> str:
    connection = config.connection
    docstring = templates.MODULE_DOCSTRING.substitute(
        database_name=_label(database_name),
        table_list=", ".join(table_names),
    )
    connection_block = templates.CONNECTION_BLOCK.substitute(
        host=_py_str(connection.host),
        port=connection.port,
        database_name=_py_str(database_name),
        user=_py_str(connection.user),
        password=_py_str(connection.password),
        pool_min=config.pool.min_connections,
        pool_max=max(config.pool.max_connections, config.pool.min_connections),
    )
    return "\n\n".join([
        docstring,
        templates.IMPORTS,
        connection_block,
        templates.CONNECTION_HELPERS,
    ])


def render_table_section(plan: TablePlan) -> str:
    """Header comment plus the five CRUD functions of one table."""
    name = plan.table.name
    key = plan.key_column
    functions = plan.functions
    key_label = _label(key)

    header = templates.SECTION_HEADER.substitute(
        table=plan.display_name,
        column_list=", ".join(plan.table.columns) or "(none)",
        key_column=key_label,
    )

    list_all = templates.LIST_ALL.substitute(
        function=functions.list_all,
        table=plan.display_name,
        sql=_py_str(f"SELECT * FROM {name};"),
    )

    get_by_id = templates.GET_BY_ID.substitute(
        function=functions.get_by_id,
        table=plan.display_name,
        key_column=key_label,
        key_param=plan.key_param,
        sql=_py_str(f"SELECT * FROM {name} WHERE {key} = %s;"),
    )

    if plan.insert_columns:
        placeholders = ", ".join(["%s"] * len(plan.insert_columns))
        insert_sql = (
            f"INSERT INTO {name} ({', '.join(plan.insert_columns)}) "
            f"VALUES ({placeholders}) RETURNING *;"
        )
        execute_args = f"sql, {_tuple_literal(plan.insert_params)}"
    else:
        insert_sql = f"INSERT INTO {name} DEFAULT VALUES RETURNING *;"
        execute_args = "sql"
    insert = templates.INSERT.substitute(
        function=functions.insert,
        table=plan.display_name,
        params=", ".join(plan.insert_params),
        sql=_py_str(insert_sql),
        execute_args=execute_args,
    )

    if plan.update_columns:
        assignments = ", ".join(f"{column} = %s" for column in plan.update_columns)
        update = templates.UPDATE.substitute(
            function=functions.update,
            table=plan.display_name,
            key_column=key_label,
            key_param=plan.key_param,
            params=", ".join([plan.key_param] + plan.update_params),
            sql=_py_str(f"UPDATE {name} SET {assignments} WHERE {key} = %s RETURNING *;"),
            values=_tuple_literal(plan.update_params + [plan.key_param]),
        )
    else:
        update = templates.UPDATE_WITHOUT_COLUMNS.substitute(
            function=functions.update,
            table=plan.display_name,
            key_param=plan.key_param,
            get_by_id=functions.get_by_id,
        )

    delete = templates.DELETE.substitute(
        function=functions.delete,
        table=plan.display_name,
        key_column=key_label,
        key_param=plan.key_param,
        sql=_py_str(f"DELETE FROM {name} WHERE {key} = %s;"),
    )

    return "\n\n\n".join([header, list_all, get_by_id, insert, update, delete])


def render_table_check(plan: TablePlan) -> str:
    functions = plan.functions
    insert_values = [synthesize_value(column) for column in plan.insert_columns]
    update_values = [synthesize_value(column) for column in plan.update_columns]
    return templates.TABLE_CHECK.substitute(
        function=plan.check_function,
        table=plan.display_name,
        list_all=functions.list_all,
        insert=functions.insert,
        insert_values=", ".join(insert_values),
        row_key=_py_str(row_key(plan.key_column)),
        get_by_id=functions.get_by_id,
        update=functions.update,
        update_args=", ".join(["key"] + update_values),
        delete=functions.delete,
    )


def render_test_driver(plans: Sequence[TablePlan]) -> str:
    checks = [render_table_check(plan) for plan in plans]
    entries = "\n".join(
        f"        ({_py_str(plan.display_name)}, {plan.check_function}),"
        for plan in plans
    )
    run_all = templates.RUN_ALL.substitute(check_entries=entries)
    return "\n\n\n".join([templates.TEST_DRIVER_HEADER] + checks + [run_all])


def render_footer(database_name: str, plans: Sequence[TablePlan]) -> str:
    lines = [
        templates.FOOTER_HEADER,
        f"# Database: {_label(database_name)}",
        f"# Tables: {len(plans)}",
    ]
    for plan in plans:
        lines.append(f"#   {plan.display_name}: {', '.join(plan.functions.names())}")
    lines.append(templates.FOOTER_RULE)
    return "\n".join(lines)


def synthesize_module(
    selected_tables: Sequence[TableModel],
    database_name: Optional[str] = None,
    config: Optional[SynthesisConfig] = None,
) -> ModuleSynthesisOutput:
    """
    Generate the data-access module for ``selected_tables``.

    Args:
        selected_tables: Tables to generate, in emission order
        database_name: Name seeded into DB_CONFIG; the configured fallback
            is used when missing or blank
        config: Synthesis settings (defaults to config.yaml)

    Returns:
        ModuleSynthesisOutput. With no tables the status is
        "nothing_to_generate" and module_text is None.
    """
    config = config or SynthesisConfig.from_config()

    if not selected_tables:
        logger.info("No tables selected; nothing to generate")
        return ModuleSynthesisOutput(status="nothing_to_generate")

    effective_name = config.resolve_database_name(database_name)
    plans = plan_tables(selected_tables)
    logger.info(f"Synthesizing module for {len(plans)} table(s) in database '{effective_name}'")

    builder = ModuleBuilder()
    builder.preamble = render_preamble(
        effective_name, [plan.display_name for plan in plans], config
    )
    for plan in plans:
        builder.add_section(plan.table.name, render_table_section(plan))
        logger.debug(
            f"Table {plan.table.name}: key={plan.key_column}, "
            f"insert={plan.insert_columns}, update={plan.update_columns}"
        )
    builder.test_driver = render_test_driver(plans)
    builder.footer = render_footer(effective_name, plans)

    return ModuleSynthesisOutput(
        status="generated",
        module_text=builder.build(),
        database_name=effective_name,
        tables=builder.tables,
        functions=[plan.functions for plan in plans],
    )


def synthesize_from_registry(
    registry: "SchemaRegistry",
    database_name: Optional[str] = None,
    config: Optional[SynthesisConfig] = None,
) -> ModuleSynthesisOutput:
    """Generate for the registry's selected tables; the parsed database name is the default."""
    return synthesize_module(
        registry.selected_tables(),
        database_name=database_name or registry.database_name,
        config=config,
    )
