"""Application settings loaded from environment variables.

Configuration file discovery (in priority order):
1. OS environment variables (always highest priority)
2. ROLLCAST_ENV_FILE environment variable (path to .env file)
3. config/.env.dev - local development
4. config/.env - production/Docker

Uses pydantic-settings for automatic type coercion and validation.
"""

from __future__ import annotations

import os
from decimal import Decimal
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import Field, SecretStr, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _find_project_root() -> Path:
    """Find the project root directory."""
    current = Path(__file__).resolve().parent

    for parent in [current, *current.parents]:
        if (parent / "config").is_dir():
            return parent
        if (parent / "pyproject.toml").is_file():
            return parent
        if parent == Path("/app"):
            return parent

    return Path(__file__).resolve().parents[2]


def get_config_dir() -> Path:
    """Get the config directory path."""
    return _find_project_root() / "config"


def _resolve_env_file_path() -> Path | None:
    """Resolve the .env file path.

    Priority:
    1. ROLLCAST_ENV_FILE env var (full or project-relative path)
    2. config/.env.dev (local development)
    3. config/.env (production)
    """
    env_file_path = os.environ.get("ROLLCAST_ENV_FILE")
    if env_file_path:
        path = Path(env_file_path)
        if not path.is_absolute():
            path = _find_project_root() / path
        if path.exists():
            return path

    config_dir = get_config_dir()

    dev_env = config_dir / ".env.dev"
    if dev_env.exists():
        return dev_env

    prod_env = config_dir / ".env"
    if prod_env.exists():
        return prod_env

    return None


class Settings(BaseSettings):
    """Application configuration loaded from environment variables.

    Values are loaded from:
    1. OS environment variables (highest priority)
    2. .env file (config/.env.dev or config/.env)
    3. Default values
    """

    model_config = SettingsConfigDict(
        env_file=_resolve_env_file_path(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    app_name: str = "rollcast"
    debug: bool = False

    # Database (POSTGRES_ prefix), DATABASE_URL_OVERRIDE wins when set
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_user: str = "postgres"
    postgres_password: SecretStr = SecretStr("")
    postgres_db: str = "rollcast"
    database_url_override: str | None = None
    database_echo: bool = False

    # API (API_ prefix)
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_cors_origins: str = ""  # Empty = no CORS allowed

    @field_validator("api_cors_origins", mode="before")
    @classmethod
    def _validate_cors_origins(cls, v: Any) -> str:
        """Ensure cors_origins is stored as comma-separated string."""
        if isinstance(v, list):
            return ",".join(v)
        return str(v) if v else ""

    # Rolling timeline (FORECAST_ prefix)
    forecast_past_weeks: int = Field(default=4, ge=0, le=52)
    forecast_future_weeks: int = Field(default=8, ge=0, le=104)
    forecast_fixed_weeks: int = Field(default=13, ge=1, le=104)
    forecast_default_scenario: str = "base"

    # Duplicate detection (DEDUP_ prefix)
    dedup_max_date_difference_hours: int = Field(default=72, ge=0)
    dedup_amount_variance: Decimal = Field(default=Decimal("0"), ge=0)
    dedup_description_similarity: float = Field(default=0.85, ge=0.0, le=1.0)
    dedup_check_history: bool = True

    # Receivables collection assumptions (RECEIVABLES_ prefix)
    receivables_current_on_time_pct: Decimal = Field(default=Decimal("90"), ge=0)
    receivables_overdue_collection_pct: Decimal = Field(default=Decimal("75"), ge=0)
    receivables_average_delay_days: int = Field(default=14, ge=0)
    receivables_collections_after_days: int = Field(default=90, ge=1)
    receivables_collections_rate_pct: Decimal = Field(default=Decimal("50"), ge=0)
    receivables_collections_delay_days: int = Field(default=30, ge=0)

    # Logging (LOG_ prefix)
    log_level: str = "INFO"

    # Computed properties
    @computed_field  # type: ignore[prop-decorator]
    @property
    def database_url(self) -> str:
        """Construct the database URL from components."""
        if self.database_url_override:
            return self.database_url_override
        return (
            f"postgresql+asyncpg://{self.postgres_user}:"
            f"{self.postgres_password.get_secret_value()}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def cors_origins(self) -> list[str]:
        """Parse CORS origins from comma-separated string."""
        return [o.strip() for o in self.api_cors_origins.split(",") if o.strip()]

    @property
    def database_type(self) -> str:
        """Database dialect name derived from the URL."""
        return self.database_url.split("+", 1)[0].split(":", 1)[0]


@lru_cache()
def get_settings() -> Settings:
    """Return cached application settings."""
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for tests)."""
    get_settings.cache_clear()
