# File: app/api/deps.py

from collections.abc import Generator

from fastapi import Depends
from sqlalchemy.engine import Engine

from app.core.config import settings
from app.db.session import SessionLocal, get_engine
from app.services.auth_service import AuthService
from app.services.credential_store import (
    CredentialStore,
    OrmCredentialStore,
    SqlCredentialStore,
)


def get_credential_store(
    bind: Engine = Depends(get_engine),
) -> Generator[CredentialStore, None, None]:
    """
    Pick the store backend from settings.

    The SQL store checks connections out of the engine pool per call and
    needs nothing else. The ORM store gets a session for the request,
    closed once the response is sent.
    """
    if settings.credential_store == "sql":
        yield SqlCredentialStore(bind)
        return

    db = SessionLocal(bind=bind)
    try:
        yield OrmCredentialStore(db)
    finally:
        db.close()


def get_auth_service(store: CredentialStore = Depends(get_credential_store)) -> AuthService:
    return AuthService(store)
