"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. BACKEND_API_URL is validated at load time.
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment and .env."""

    # App
    app_name: str = "docshare"
    app_version: str = "1.0.0"
    debug: bool = False

    # Document backend
    backend_api_url: str = "http://localhost:5000/api"
    backend_timeout_seconds: float = 30.0

    # View state persistence; empty path keeps view state in memory only
    view_state_path: str = ".docshare/view_state.json"

    # Listings
    share_directory_limit: int = 100
    default_page_size: int = 10
    max_page_size: int = 100

    # CORS
    allowed_origins: str = "http://localhost:3000,http://localhost:5173"

    # Request / middleware
    request_timeout_seconds: int = 60
    request_id_header: str = "X-Request-ID"
    correlation_id_header: str = "X-Correlation-ID"
    max_upload_size: int = 50 * 1024 * 1024  # 50MB

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @field_validator("backend_api_url")
    @classmethod
    def validate_backend_api_url(cls, value: str) -> str:
        value = value.strip().rstrip("/")
        if not value.startswith(("http://", "https://")):
            raise ValueError(
                f"BACKEND_API_URL must start with http:// or https://, got: {value!r}"
            )
        return value

    @field_validator("default_page_size", "max_page_size", "share_directory_limit")
    @classmethod
    def validate_positive(cls, value: int) -> int:
        if value < 1:
            raise ValueError("Page sizes and limits must be at least 1")
        return value

    @property
    def origins(self) -> list[str]:
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.
    """
    return Settings()
