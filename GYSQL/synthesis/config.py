"""Typed view of the ``synthesis`` section of config.yaml."""

from __future__ import annotations

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from GYSQL.config import get_config


class ConnectionSettings(BaseModel):
    host: str = "localhost"
    port: int = 5432
    user: str = "postgres"
    password: str = "postgres"

    model_config = ConfigDict(extra="forbid")


class PoolSettings(BaseModel):
    min_connections: int = Field(default=1, ge=1)
    max_connections: int = Field(default=5, ge=1)

    model_config = ConfigDict(extra="forbid")


class SynthesisConfig(BaseModel):
    """Settings baked into the generated module's preamble."""

    fallback_database_name: str = "mi_base_de_datos"
    connection: ConnectionSettings = Field(default_factory=ConnectionSettings)
    pool: PoolSettings = Field(default_factory=PoolSettings)

    model_config = ConfigDict(extra="forbid")

    @classmethod
    def from_config(cls) -> "SynthesisConfig":
        return cls(**(get_config("synthesis") or {}))

    def resolve_database_name(self, database_name: Optional[str]) -> str:
        name = (database_name or "").strip()
        return name or self.fallback_database_name
