# File: app/services/credential_store.py

"""
Persistence of User records, keyed by username.

Two interchangeable backends are provided:
  - OrmCredentialStore: goes through a SQLAlchemy ORM Session
  - SqlCredentialStore: issues plain parameterized statements on an Engine,
    taking a pooled connection for each call

Both rely on the UNIQUE constraint of users.username for uniqueness and
report a violation as ConstraintViolation. Values the database refuses to
store (DataError) are reported as ValidationError.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from sqlalchemy import select, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import DataError, IntegrityError
from sqlalchemy.orm import Session

from app.core.exceptions import ConstraintViolation, ValidationError
from app.models.user import User

logger = logging.getLogger("login_portal.store")

# the database refused a value (too long, bad encoding, ...)
REJECTED_VALUE_MESSAGE = "Username or password was rejected by the database"


class CredentialStore(ABC):
    @abstractmethod
    def find_by_username(self, username: Optional[str]) -> Optional[User]:
        """Return the user with exactly this username, or None."""

    @abstractmethod
    def save(self, user: User) -> User:
        """
        Insert a new user and return it with its id populated.

        Raises ConstraintViolation if the username is already taken.
        """


class OrmCredentialStore(CredentialStore):
    def __init__(self, db: Session):
        self.db = db

    def find_by_username(self, username: Optional[str]) -> Optional[User]:
        if username is None:
            return None
        stmt = select(User).where(User.username == username)
        return self.db.execute(stmt).scalars().first()

    def save(self, user: User) -> User:
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            logger.warning("Insert rejected for username %r: %s", user.username, exc.orig)
            raise ConstraintViolation("User already exists") from exc
        except DataError as exc:
            self.db.rollback()
            logger.warning("Insert rejected for username %r: %s", user.username, exc.orig)
            raise ValidationError(REJECTED_VALUE_MESSAGE) from exc
        self.db.refresh(user)
        return user


class SqlCredentialStore(CredentialStore):
    SELECT_BY_USERNAME = text(
        "SELECT id, username, password FROM users WHERE username = :username"
    )
    INSERT_USER = text(
        "INSERT INTO users (username, password) VALUES (:username, :password)"
    )

    def __init__(self, engine: Engine):
        self.engine = engine

    def find_by_username(self, username: Optional[str]) -> Optional[User]:
        if username is None:
            return None
        with self.engine.connect() as conn:
            row = conn.execute(self.SELECT_BY_USERNAME, {"username": username}).first()
        if row is None:
            return None
        return User(id=row.id, username=row.username, password=row.password)

    def save(self, user: User) -> User:
        params = {"username": user.username, "password": user.password}
        try:
            # begin() commits on success and rolls back on any exception
            with self.engine.begin() as conn:
                conn.execute(self.INSERT_USER, params)
                row = conn.execute(self.SELECT_BY_USERNAME, {"username": user.username}).first()
        except IntegrityError as exc:
            logger.warning("Insert rejected for username %r: %s", user.username, exc.orig)
            raise ConstraintViolation("User already exists") from exc
        except DataError as exc:
            logger.warning("Insert rejected for username %r: %s", user.username, exc.orig)
            raise ValidationError(REJECTED_VALUE_MESSAGE) from exc
        return User(id=row.id, username=row.username, password=row.password)
