import pytest
from pydantic import ValidationError

from GYSQL.registry import SchemaRegistry
from GYSQL.utils.error_handling import UnknownTableError


SQL = """
CREATE DATABASE tienda;
CREATE TABLE clientes (id SERIAL, nombre TEXT);
CREATE TABLE productos (id SERIAL, precio NUMERIC);
CREATE TABLE pedidos (id SERIAL, cliente_id INT);
"""


@pytest.fixture
def registry() -> SchemaRegistry:
    return SchemaRegistry.from_sql(SQL, "legacy")


def test_new_registry_has_nothing_selected(registry: SchemaRegistry) -> None:
    assert len(registry) == 3
    assert registry.selected_count() == 0
    assert registry.database_name == "tienda"


def test_empty_registry() -> None:
    registry = SchemaRegistry()
    assert len(registry) == 0
    assert registry.selected_tables() == ()
    registry.toggle_all()
    assert registry.selected_count() == 0


def test_toggle_selection_flips_one_table(registry: SchemaRegistry) -> None:
    registry.toggle_selection("productos")
    assert [t.name for t in registry.selected_tables()] == ["productos"]
    registry.toggle_selection("productos")
    assert registry.selected_count() == 0


def test_toggle_selection_ignores_unknown_table(registry: SchemaRegistry) -> None:
    registry.toggle_selection("facturas")
    assert registry.selected_count() == 0


def test_toggle_all_selects_then_clears(registry: SchemaRegistry) -> None:
    registry.toggle_selection("clientes")
    registry.toggle_all()
    assert registry.selected_count() == 3
    registry.toggle_all()
    assert registry.selected_count() == 0


def test_selected_tables_follow_declaration_order(registry: SchemaRegistry) -> None:
    registry.toggle_selection("pedidos")
    registry.toggle_selection("clientes")
    assert [t.name for t in registry.selected_tables()] == ["clientes", "pedidos"]


def test_select_only(registry: SchemaRegistry) -> None:
    registry.toggle_all()
    registry.select_only(["productos"])
    assert [t.name for t in registry.selected_tables()] == ["productos"]


def test_select_only_unknown_table_leaves_selection(registry: SchemaRegistry) -> None:
    registry.toggle_selection("clientes")
    with pytest.raises(UnknownTableError) as excinfo:
        registry.select_only(["productos", "facturas"])
    assert excinfo.value.table_names == ("facturas",)
    assert excinfo.value.error_type == "unknown_table"
    assert [t.name for t in registry.selected_tables()] == ["clientes"]


def test_reload_replaces_tables_and_resets_selection(registry: SchemaRegistry) -> None:
    registry.toggle_all()
    registry.reload("CREATE TABLE facturas (id INT, total NUMERIC);")
    assert registry.table_names() == ["facturas"]
    assert registry.selected_count() == 0
    assert registry.database_name is None


def test_reload_with_no_tables_empties_registry(registry: SchemaRegistry) -> None:
    registry.reload("SELECT 1;")
    assert len(registry) == 0


def test_snapshot_is_independent(registry: SchemaRegistry) -> None:
    registry.toggle_selection("clientes")
    copy = registry.snapshot()
    copy.toggle_all()
    assert copy.selected_count() == 3
    assert registry.selected_count() == 1
    registry.clear_selection()
    assert copy.selected_count() == 3


def test_table_name_and_columns_are_frozen(registry: SchemaRegistry) -> None:
    table = registry.get_table("clientes")
    with pytest.raises(ValidationError):
        table.name = "otra"
    with pytest.raises(ValidationError):
        table.columns = ("x",)
    table.selected = True
    assert table.selected is True


def test_contains_and_summary(registry: SchemaRegistry) -> None:
    registry.toggle_selection("pedidos")
    assert "pedidos" in registry
    assert "facturas" not in registry
    summary = registry.summary()
    assert summary["selected_count"] == 1
    assert summary["tables"][2] == {"name": "pedidos", "columns": ["id", "cliente_id"], "selected": True}
    assert summary["database_statements"] == ["CREATE DATABASE tienda;"]
