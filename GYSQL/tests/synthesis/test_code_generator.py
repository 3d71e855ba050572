"""Tests for module synthesis."""

import ast

import pytest

from GYSQL.ir.models import TableModel
from GYSQL.parsing import parse_tables
from GYSQL.registry import SchemaRegistry
from GYSQL.synthesis import SynthesisConfig, synthesize_from_registry, synthesize_module


USUARIOS_SQL = """
CREATE DATABASE demo;
CREATE TABLE usuarios (
    id SERIAL PRIMARY KEY,
    nombre VARCHAR(100),
    edad INT,
    activo BOOLEAN
);
"""


@pytest.fixture
def config() -> SynthesisConfig:
    return SynthesisConfig()


def _table(name, *columns) -> TableModel:
    return TableModel(name=name, columns=columns, selected=True)


def test_nothing_selected_generates_nothing(config) -> None:
    output = synthesize_module([], database_name="demo", config=config)
    assert output.status == "nothing_to_generate"
    assert output.module_text is None
    assert output.generated is False


def test_insert_and_update_signatures(config) -> None:
    output = synthesize_module([_table("t", "id", "nombre", "edad")], config=config)
    text = output.module_text
    assert "def insert_t(nombre, edad):" in text
    assert "def update_t(id, nombre, edad):" in text
    assert "def get_t_by_id(id):" in text
    assert "def delete_t(id):" in text
    assert "def get_all_t():" in text
    assert '"INSERT INTO t (nombre, edad) VALUES (%s, %s) RETURNING *;"' in text
    assert '"UPDATE t SET nombre = %s, edad = %s WHERE id = %s RETURNING *;"' in text


def test_usuarios_end_to_end(config) -> None:
    registry = SchemaRegistry.from_sql(USUARIOS_SQL, "legacy")
    registry.toggle_selection("usuarios")
    output = synthesize_from_registry(registry, config=config)
    text = output.module_text

    assert output.status == "generated"
    assert output.database_name == "demo"
    assert output.tables == ["usuarios"]
    assert '"dbname": "demo",' in text
    assert "def insert_usuarios(nombre, edad, activo):" in text
    assert "def update_usuarios(id, nombre, edad, activo):" in text
    assert 'insert_usuarios("Juan Pérez", 25, True)' in text
    assert 'update_usuarios(key, "Juan Pérez", 25, True)' in text
    assert 'key = created.get("id")' in text

    functions = output.functions[0]
    assert functions.key_column == "id"
    assert functions.insert_columns == ["nombre", "edad", "activo"]
    assert functions.names() == [
        "get_all_usuarios",
        "get_usuarios_by_id",
        "insert_usuarios",
        "update_usuarios",
        "delete_usuarios",
    ]


def test_generated_module_is_valid_python(config) -> None:
    tables = parse_tables(
        USUARIOS_SQL
        + "CREATE TABLE pedidos (id SERIAL, usuario_id INT, fecha DATE, "
        "FOREIGN KEY (usuario_id) REFERENCES usuarios(id));\n"
        "CREATE TABLE vacia ();\n"
        'CREATE TABLE "Clase" (class INT, "nombre completo" TEXT);\n'
    )
    output = synthesize_module(tables, database_name="demo", config=config)
    ast.parse(output.module_text)


def test_generation_is_deterministic(config) -> None:
    tables = [_table("clientes", "id", "nombre"), _table("productos", "id", "precio")]
    first = synthesize_module(tables, database_name="tienda", config=config)
    second = synthesize_module(tables, database_name="tienda", config=config)
    assert first.module_text == second.module_text


@pytest.mark.parametrize("database_name", [None, "", "   "])
def test_fallback_database_name(config, database_name) -> None:
    output = synthesize_module([_table("t", "id")], database_name=database_name, config=config)
    assert output.database_name == "mi_base_de_datos"
    assert '"dbname": "mi_base_de_datos",' in output.module_text


def test_explicit_database_name_beats_parsed_one(config) -> None:
    registry = SchemaRegistry.from_sql(USUARIOS_SQL, "legacy")
    registry.toggle_all()
    output = synthesize_from_registry(registry, database_name="produccion", config=config)
    assert output.database_name == "produccion"


def test_preamble_emitted_once_and_sections_in_order(config) -> None:
    tables = [_table("clientes", "id", "nombre"), _table("productos", "id", "precio")]
    text = synthesize_module(tables, config=config).module_text
    assert text.count("DB_CONFIG = {") == 1
    assert text.count("def get_connection():") == 1
    assert text.count('if __name__ == "__main__":') == 1
    assert text.index("def insert_clientes(") < text.index("def insert_productos(")
    assert text.index("def check_clientes(") < text.index("def check_productos(")


def test_test_driver_never_deletes(config) -> None:
    text = synthesize_module([_table("usuarios", "id", "nombre")], config=config).module_text
    assert "# delete_usuarios(key)" in text
    assert "\n    delete_usuarios(key)" not in text
    assert "def test_" not in text


def test_key_parameter_renamed_on_collision(config) -> None:
    output = synthesize_module([_table("registros", "identificador", "nombre")], config=config)
    text = output.module_text
    assert "def insert_registros(identificador, nombre):" in text
    assert "def update_registros(current_identificador, identificador, nombre):" in text
    assert "(identificador, nombre, current_identificador)" in text


def test_table_without_columns(config) -> None:
    output = synthesize_module([_table("vacia")], config=config)
    text = output.module_text
    assert output.functions[0].key_column == "id"
    assert "def insert_vacia():" in text
    assert '"INSERT INTO vacia DEFAULT VALUES RETURNING *;"' in text
    assert "def update_vacia(id):" in text
    assert "return get_vacia_by_id(id)" in text


def test_single_insert_column_uses_tuple(config) -> None:
    text = synthesize_module([_table("etiquetas", "id", "texto")], config=config).module_text
    assert "cur.execute(sql, (texto,))" in text


def test_reserved_and_keyword_columns_get_safe_parameters(config) -> None:
    text = synthesize_module([_table("t", "id", "sql", "class")], config=config).module_text
    assert "def insert_t(sql_2, class_):" in text
    assert '"INSERT INTO t (sql, class) VALUES (%s, %s) RETURNING *;"' in text


def test_duplicate_table_names_get_unique_functions(config) -> None:
    output = synthesize_module([_table("t", "id"), _table("T", "id")], config=config)
    assert [f.insert for f in output.functions] == ["insert_t", "insert_t_2"]


def test_connection_settings_come_from_config() -> None:
    config = SynthesisConfig(
        connection={"host": "db.interna", "port": 6543, "user": "app", "password": "secreto"},
        pool={"min_connections": 2, "max_connections": 8},
    )
    text = synthesize_module([_table("t", "id")], config=config).module_text
    assert '"host": "db.interna",' in text
    assert '"port": 6543,' in text
    assert "POOL_MIN_CONNECTIONS = 2" in text
    assert "POOL_MAX_CONNECTIONS = 8" in text
