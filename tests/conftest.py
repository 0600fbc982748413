import os
import uuid

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from valueflows.db import models
from valueflows.utils.settings import refresh_settings

# Page sizes and database URLs are read from the environment; keep the
# process defaults out of the way unless a test sets them explicitly.
for _var in ("PAGE_DEFAULT_SIZE", "PAGE_MAX_SIZE"):
    os.environ.pop(_var, None)


@pytest.fixture(autouse=True)
def _fresh_settings():
    refresh_settings()
    yield
    refresh_settings()


@pytest.fixture
def engine():
    # In-memory SQLite with StaticPool so the schema persists across connections
    eng = create_engine(
        "sqlite+pysqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    models.Base.metadata.create_all(bind=eng)
    try:
        yield eng
    finally:
        models.Base.metadata.drop_all(bind=eng)
        eng.dispose()


@pytest.fixture
def SessionLocal(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(SessionLocal):
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


def _add(db, obj):
    db.add(obj)
    db.commit()
    db.refresh(obj)
    return obj


@pytest.fixture
def unit(db):
    return _add(db, models.Unit(label="kilogram", symbol="kg"))


@pytest.fixture
def spec(db, unit):
    return _add(db, models.ResourceSpecification(name="Wheat", default_unit_of_resource_id=unit.id))


@pytest.fixture
def make_agent(db):
    def _make(name: str = "Alice", type: str = "per", **kw):
        return _add(db, models.Agent(name=name, type=type, **kw))
    return _make


@pytest.fixture
def make_resource(db, spec):
    def _make(name: str = None, **kw):
        kw.setdefault("conforms_to_id", spec.id)
        return _add(db, models.EconomicResource(name=name or f"res-{uuid.uuid4().hex[:8]}", **kw))
    return _make


@pytest.fixture
def client(db):
    from fastapi.testclient import TestClient

    from valueflows.api.main import app
    from valueflows.db.database import get_db

    # FastAPI dependency override so endpoints use the test session
    def _override_get_db():
        yield db

    app.dependency_overrides[get_db] = _override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.pop(get_db, None)
