"""
Centralized configuration for the logistics console.

All settings are loaded from environment variables prefixed with
LOGISTICS_ (e.g. LOGISTICS_API_BASE_URL), with sensible defaults.
"""

from functools import lru_cache
from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="LOGISTICS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Logistics Console"
    app_version: str = "0.1.0"
    log_level: str = "WARNING"

    # Backend
    api_base_url: str = "http://localhost:8080/api"
    request_timeout: float = 30.0  # seconds

    # Token persistence
    storage_path: Path = Path.home() / ".logistics-console" / "storage.json"
    token_key: str = "auth_token"
    user_key: str = "auth_user"

    # Routing surface
    login_path: str = "/login"
    dashboard_path: str = "/dashboard"
    admin_path: str = "/admin"
    operator_path: str = "/operator"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
