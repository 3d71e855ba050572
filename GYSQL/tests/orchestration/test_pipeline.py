import pytest

from GYSQL.orchestration import run_pipeline
from GYSQL.synthesis import SynthesisConfig
from GYSQL.utils.error_handling import UnknownTableError


SQL = """
CREATE DATABASE escuela;
CREATE TABLE alumnos (id SERIAL, nombre TEXT, edad INT);
CREATE TABLE cursos (id SERIAL, titulo TEXT, precio NUMERIC(8,2));
"""


@pytest.fixture
def config() -> SynthesisConfig:
    return SynthesisConfig()


def test_pipeline_without_selection_generates_nothing(config) -> None:
    result = run_pipeline(SQL, split_mode="legacy", config=config)
    assert result.output.status == "nothing_to_generate"
    assert result.module_text is None
    assert result.registry.table_names() == ["alumnos", "cursos"]


def test_pipeline_select_all(config) -> None:
    result = run_pipeline(SQL, select_all=True, split_mode="depth_aware", config=config)
    assert result.output.tables == ["alumnos", "cursos"]
    assert result.output.database_name == "escuela"
    assert "def insert_cursos(titulo, precio):" in result.module_text


def test_pipeline_explicit_selection_wins_over_select_all(config) -> None:
    result = run_pipeline(SQL, selected=["cursos"], select_all=True, split_mode="legacy", config=config)
    assert result.output.tables == ["cursos"]


def test_pipeline_unknown_table(config) -> None:
    with pytest.raises(UnknownTableError):
        run_pipeline(SQL, selected=["profesores"], split_mode="legacy", config=config)


def test_pipeline_database_override(config) -> None:
    result = run_pipeline(SQL, select_all=True, database_name="otra", split_mode="legacy", config=config)
    assert '"dbname": "otra",' in result.module_text
