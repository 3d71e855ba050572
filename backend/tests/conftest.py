"""Pytest fixtures and configuration."""

import pytest
from fastapi.testclient import TestClient
from backend.main import app
from backend.utils.workspace_manager import WorkspaceManager
from backend.services.generation_service import GenerationService
from GYSQL.synthesis import SynthesisConfig


@pytest.fixture
def client():
    """Test client for FastAPI app."""
    return TestClient(app)


@pytest.fixture
def workspace_manager():
    """Fresh WorkspaceManager instance for testing."""
    return WorkspaceManager()


@pytest.fixture
def generation_service():
    """GenerationService with built-in synthesis defaults and no staging delay."""
    return GenerationService(config=SynthesisConfig())


@pytest.fixture
def sample_session_id():
    """Sample session ID (UUID format) for testing."""
    return "3f2b8c1e-0a4d-4e6f-9b7a-1c2d3e4f5a6b"


@pytest.fixture
def sample_sql():
    """Sample script as the grammar service emits it."""
    return """CREATE DATABASE demo;
USE demo;

CREATE TABLE usuarios (
    id SERIAL PRIMARY KEY,
    nombre VARCHAR(100),
    edad INT,
    activo BOOLEAN
);

CREATE TABLE pedidos (
    id SERIAL PRIMARY KEY,
    usuario_id INT,
    fecha DATE,
    FOREIGN KEY (usuario_id) REFERENCES usuarios(id)
);
"""
