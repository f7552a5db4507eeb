# File: tests/test_session.py

from app.db.session import SessionLocal, engine, get_engine


def test_engine_dependency_returns_shared_engine():
    assert get_engine() is engine
    assert SessionLocal.kw["bind"] is engine


def test_pooled_connections_are_pinged_before_reuse():
    assert engine.pool._pre_ping is True
