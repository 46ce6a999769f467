"""Application settings loaded from environment variables.

Configuration file discovery (in priority order):
1. OS environment variables (always highest priority)
2. MSA_ENV_FILE environment variable (path to a .env file)
3. config/.env.dev - local development
4. config/.env - production/Docker

Uses pydantic-settings for automatic type coercion and validation.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from pydantic import SecretStr, field_validator
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


def _get_config_dir() -> Path:
    """Get the config directory path."""
    return _find_project_root() / "config"


def _resolve_env_file_path() -> Path | None:
    """Resolve the .env file path.

    Priority:
    1. MSA_ENV_FILE env var (absolute, or relative to the project root)
    2. config/.env.dev (local development)
    3. config/.env (production)
    """
    env_file_path = os.environ.get("MSA_ENV_FILE")
    if env_file_path:
        path = Path(env_file_path)
        if not path.is_absolute():
            path = _find_project_root() / path
        if path.exists():
            return path

    config_dir = _get_config_dir()

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

    # Security (MUST be set - token issuing fails without it)
    jwt_key: SecretStr  # Raw text, or "base64:<data>"

    # Application
    app_name: str = "MySvelteApp"
    debug: bool = False

    # JWT
    jwt_issuer: str = "mysvelteapp"
    jwt_audience: str = "mysvelteapp"
    jwt_access_token_lifetime_hours: int = 24

    # Password hashing (bcrypt-pbkdf rounds; changing it invalidates stored hashes)
    password_hash_rounds: int = 50

    # Database
    database_url: str = "sqlite+aiosqlite:///./mysvelteapp.db"

    # Logging
    log_level: str = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, v: object) -> str:
        return str(v).strip().upper() if v else "INFO"

    @field_validator("password_hash_rounds")
    @classmethod
    def _validate_rounds(cls, v: int) -> int:
        if v < 1:
            msg = "password_hash_rounds must be at least 1"
            raise ValueError(msg)
        return v


@lru_cache()
def get_settings() -> Settings:
    """Return cached application settings.

    The required jwt_key must be provided via environment variables
    or a .env file.
    """
    return Settings()  # type: ignore[call-arg]  # pydantic-settings loads from env


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for tests)."""
    get_settings.cache_clear()
