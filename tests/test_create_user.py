# File: tests/test_create_user.py

from sqlalchemy.orm import sessionmaker

import create_user
from app.services.auth_service import AuthService
from app.services.credential_store import OrmCredentialStore


def patch_database(monkeypatch, engine):
    monkeypatch.setattr(create_user, "engine", engine)
    monkeypatch.setattr(create_user, "SessionLocal", sessionmaker(bind=engine))
    monkeypatch.setattr(create_user, "init_db", lambda: None)


def test_creates_user(monkeypatch, engine, db, store_backend, capsys):
    patch_database(monkeypatch, engine)

    assert create_user.main(["alice", "secret-pw"]) == 0
    assert "Created user alice" in capsys.readouterr().out
    assert AuthService(OrmCredentialStore(db)).login("alice", "secret-pw").username == "alice"


def test_rejects_invalid_user(monkeypatch, engine, store_backend, capsys):
    patch_database(monkeypatch, engine)

    assert create_user.main(["al", "secret-pw"]) == 1
    assert "at least 3 characters" in capsys.readouterr().err
