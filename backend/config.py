"""Configuration settings for the backend API."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Literal, Optional


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore"  # Ignore extra environment variables
    )

    # API
    api_title: str = "GYSQL Backend API"
    api_version: str = "1.0.0"
    # Default to common local dev origins (Vite=5173, CRA=3000).
    # Can be overridden via env var: CORS_ORIGINS='["http://localhost:5173"]'
    cors_origins: List[str] = [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    # Generation
    # Pause before generating so the editor can show its "working" state
    staging_delay_seconds: float = 0.0
    # None -> parser.split_mode from GYSQL/config/config.yaml
    default_split_mode: Optional[Literal["legacy", "depth_aware"]] = None


settings = Settings()
