"""Runtime settings sourced from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional


DEFAULT_PAGE_SIZE = 50
MAX_PAGE_SIZE = 100


@dataclass(frozen=True)
class Settings:
    database_url: Optional[str]
    page_default_size: int
    page_max_size: int
    log_level: str
    db_pool_timeout: Optional[int]
    db_statement_timeout_ms: Optional[int]


def _int_env(name: str, default: Optional[int]) -> Optional[int]:
    """Return an integer environment value, falling back to ``default``."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


def _database_url() -> Optional[str]:
    # If DATABASE_URL is explicitly set, use it
    if os.getenv("DATABASE_URL"):
        return os.getenv("DATABASE_URL")

    # Otherwise, generate from individual components (all must be set)
    parts = {
        "POSTGRES_USER": os.getenv("POSTGRES_USER"),
        "POSTGRES_PASSWORD": os.getenv("POSTGRES_PASSWORD"),
        "POSTGRES_HOST": os.getenv("POSTGRES_HOST"),
        "POSTGRES_PORT": os.getenv("POSTGRES_PORT"),
        "POSTGRES_DB": os.getenv("POSTGRES_DB"),
    }
    if not any(parts.values()):
        return None
    missing = [name for name, value in parts.items() if not value]
    if missing:
        raise ValueError(f"Missing required database environment variables: {', '.join(missing)}")
    return (
        f"postgresql://{parts['POSTGRES_USER']}:{parts['POSTGRES_PASSWORD']}"
        f"@{parts['POSTGRES_HOST']}:{parts['POSTGRES_PORT']}/{parts['POSTGRES_DB']}"
    )


@lru_cache(maxsize=None)
def get_settings() -> Settings:
    """Return the cached settings state sourced from the environment."""
    default_size = _int_env("PAGE_DEFAULT_SIZE", DEFAULT_PAGE_SIZE)
    max_size = _int_env("PAGE_MAX_SIZE", MAX_PAGE_SIZE)
    if default_size < 1 or max_size < 1:
        raise ValueError("PAGE_DEFAULT_SIZE and PAGE_MAX_SIZE must be positive")
    return Settings(
        database_url=_database_url(),
        page_default_size=min(default_size, max_size),
        page_max_size=max_size,
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        db_pool_timeout=_int_env("DB_POOL_TIMEOUT", None),
        db_statement_timeout_ms=_int_env("DB_STATEMENT_TIMEOUT_MS", None),
    )


def refresh_settings() -> None:
    """Invalidate cached settings (useful for tests)."""
    get_settings.cache_clear()
