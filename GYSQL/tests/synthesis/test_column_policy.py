import pytest

from GYSQL.synthesis import infer_key_column, insert_columns, update_columns


@pytest.mark.parametrize(
    "columns,expected",
    [
        (["id", "nombre"], "id"),
        (["nombre", "usuario_id"], "usuario_id"),
        (["nombre", "ID_cliente"], "ID_cliente"),
        (["codigo", "nombre"], "codigo"),
        # Substring match: "provider" contains "id"
        (["provider", "id"], "provider"),
        ([], None),
    ],
)
def test_infer_key_column(columns, expected) -> None:
    assert infer_key_column(columns) == expected


def test_insert_excludes_id_and_foreign_keys_only() -> None:
    columns = ["id", "usuario_id", "identificador", "nombre", "ID"]
    # "identificador" contains "id" but is neither "id" nor "*_id"
    assert insert_columns(columns) == ["identificador", "nombre"]


def test_update_excludes_literal_id() -> None:
    assert update_columns(["id", "nombre", "edad"]) == ["nombre", "edad"]
    assert update_columns(["identificador", "nombre"]) == ["identificador", "nombre"]


def test_policy_preserves_declaration_order() -> None:
    columns = ["edad", "id", "nombre", "cliente_id", "activo"]
    assert insert_columns(columns) == ["edad", "nombre", "activo"]
    assert update_columns(columns) == ["edad", "nombre", "activo"]
