"""Application settings using Pydantic BaseSettings."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Document store backend
    store_backend: Literal["memory", "supabase"] = "memory"

    # Supabase Configuration
    supabase_url: str | None = None
    supabase_anon_key: str | None = None
    supabase_service_role_key: str | None = None

    # Observability
    logfire_token: str | None = None
    environment: str = "development"

    # Server Configuration
    port: int = 8000
    cors_origins: list[str] = ["http://localhost:3000", "http://127.0.0.1:3000"]
    seed_on_startup: bool = False

    # Activity feed limits
    activity_default_limit: int = 20
    activity_api_limit: int = 50
    status_activity_limit: int = 5


# Global settings instance
settings = Settings()
