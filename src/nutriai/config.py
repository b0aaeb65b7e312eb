"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    environment: str = _ENVIRONMENT
    host: str = "0.0.0.0"  # noqa: S104
    port: int = 3000
    upload_dir: str = "uploads"
    max_upload_bytes: int = 10 * 1024 * 1024
    analysis_delay_seconds: float = 1.5
    log_backend: str = "memory"
    supabase_url: str | None = None
    supabase_service_key: str | None = None
    cors_allowed_origins: str = "*"
    log_level: str = "INFO"
    timezone: str | None = None

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_allowed_origins(raw: str | None) -> list[str]:
    """Parse comma-separated CORS origins from env."""
    if raw is None:
        return ["*"]
    cleaned = raw.strip()
    if cleaned in {"", "*"}:
        return ["*"]
    origins = [chunk.strip() for chunk in cleaned.split(",")]
    return [origin for origin in origins if origin] or ["*"]
