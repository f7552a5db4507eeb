# File: tests/conftest.py

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.exc import DataError
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.config import settings
from app.db.init_db import init_db
from app.db.session import get_engine
from app.main import app


@pytest.fixture
def engine():
    # one shared in-memory database per test
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(params=["orm", "sql"])
def store_backend(request, monkeypatch):
    monkeypatch.setattr(settings, "credential_store", request.param)
    return request.param


@pytest.fixture
def client(engine, store_backend):
    app.dependency_overrides[get_engine] = lambda: engine
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def value_too_long() -> DataError:
    """What psycopg surfaces when a value overflows a VARCHAR(n) column."""
    return DataError(
        "INSERT INTO users (username, password) VALUES (%(username)s, %(password)s)",
        {},
        Exception("value too long for type character varying(255)"),
    )
