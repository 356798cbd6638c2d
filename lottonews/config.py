"""Environment-based configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def resolve_database_url() -> str:
    """Resolve DB connection string.

    Priority:
      1) DATABASE_URL (explicit)
      2) Fallback to the sqlite file next to the working directory
    """

    explicit = os.getenv("DATABASE_URL")
    if explicit:
        return explicit
    return "sqlite:///./db.sqlite"


@dataclass(frozen=True)
class BaseConfig:
    """Base configuration shared by all environments."""

    APP_ENV: str = os.getenv("APP_ENV", "development")
    SECRET_KEY: str = os.getenv("SECRET_KEY", "dev-secret")

    DATABASE_URL: str = resolve_database_url()

    # Static assets and uploaded files are served from PUBLIC_DIR at "/".
    PUBLIC_DIR: str = os.path.abspath(os.getenv("PUBLIC_DIR", "public"))
    UPLOAD_SUBDIR: str = os.getenv("UPLOAD_SUBDIR", "uploads")
    MAX_CONTENT_LENGTH: int = _env_int("MAX_UPLOAD_MB", 16) * 1024 * 1024

    # Seconds sqlite waits on a locked database before raising.
    DB_BUSY_TIMEOUT: float = float(_env_int("DB_BUSY_TIMEOUT", 5))

    # When enabled, confirm/reject only apply to pending tickets.
    STRICT_TICKET_DECISIONS: bool = _env_flag("STRICT_TICKET_DECISIONS")

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")


@dataclass(frozen=True)
class DevelopmentConfig(BaseConfig):
    """Development configuration."""

    DEBUG: bool = True


@dataclass(frozen=True)
class ProductionConfig(BaseConfig):
    """Production configuration."""

    DEBUG: bool = False


def get_config() -> type[BaseConfig]:
    """Resolve configuration class based on APP_ENV."""

    env = os.getenv("APP_ENV", "development").lower().strip()
    if env == "production":
        return ProductionConfig
    return DevelopmentConfig
