"""
Database engine and session management.

Builds the SQLAlchemy engine lazily from environment configuration and
exposes the FastAPI session dependency. Repository functions never reach for
this module; they receive their session explicitly.
"""
import logging
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from valueflows.utils.settings import get_settings

logger = logging.getLogger(__name__)

_engine: Optional[Engine] = None
_SessionLocal: Optional[sessionmaker] = None


def _engine_kwargs(url: str) -> dict:
    settings = get_settings()
    if url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if ":memory:" in url:
            # In-memory SQLite with StaticPool so the schema persists across connections
            kwargs["poolclass"] = StaticPool
        return kwargs

    kwargs = {"pool_pre_ping": True}
    if settings.db_pool_timeout is not None:
        kwargs["pool_timeout"] = settings.db_pool_timeout
    if settings.db_statement_timeout_ms is not None and url.startswith("postgresql"):
        kwargs["connect_args"] = {"options": f"-c statement_timeout={settings.db_statement_timeout_ms}"}
    return kwargs


def build_engine(url: str) -> Engine:
    """Create an engine for ``url`` with dialect-appropriate options."""
    return create_engine(url, **_engine_kwargs(url))


def get_engine() -> Engine:
    global _engine
    if _engine is None:
        url = get_settings().database_url
        if not url:
            raise ValueError("DATABASE_URL (or POSTGRES_* variables) must be set")
        _engine = build_engine(url)
        logger.info("db_engine_created: dialect=%s", _engine.dialect.name)
    return _engine


def get_sessionmaker() -> sessionmaker:
    global _SessionLocal
    if _SessionLocal is None:
        _SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=get_engine())
    return _SessionLocal


def configure(engine: Engine) -> None:
    """Rebind the module to ``engine`` (used by tests and scripts)."""
    global _engine, _SessionLocal
    _engine = engine
    _SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    """Dependency to get a database session."""
    db = get_sessionmaker()()
    try:
        yield db
    finally:
        db.close()
