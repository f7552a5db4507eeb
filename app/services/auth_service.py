# File: app/services/auth_service.py

"""
Authentication service.

Contains the registration and login rules:
  - Username uniqueness (checked up front, enforced by the store)
  - Minimum lengths: 3 for usernames, 6 for passwords
  - Verbatim password comparison on login

The service keeps no state of its own; everything goes through the
CredentialStore it is given.
"""

import logging
from typing import Optional

from app.core.exceptions import (
    AlreadyExists,
    ConstraintViolation,
    InvalidCredentials,
    ValidationError,
)
from app.models.user import User
from app.services.credential_store import CredentialStore

logger = logging.getLogger("login_portal.auth")

MIN_USERNAME_LENGTH = 3
MIN_PASSWORD_LENGTH = 6

EMPTY_CREDENTIALS_MESSAGE = "Username and password cannot be empty"
LENGTH_CONSTRAINT_MESSAGE = (
    f"Username must be at least {MIN_USERNAME_LENGTH} characters and "
    f"password at least {MIN_PASSWORD_LENGTH} characters long"
)


class AuthService:
    def __init__(self, store: CredentialStore):
        self.store = store

    def register(self, username: Optional[str], password: Optional[str]) -> User:
        """
        Create a new user.

        The existence check runs before the emptiness and length checks,
        so a taken username always reports "User already exists".

        Raises:
            AlreadyExists: username is taken (also when a concurrent
                registration wins the race at insert time)
            ValidationError: empty or too-short username/password
        """
        if self.store.find_by_username(username) is not None:
            raise AlreadyExists()
        if not username or not password:
            raise ValidationError(EMPTY_CREDENTIALS_MESSAGE)
        if len(username) < MIN_USERNAME_LENGTH or len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(LENGTH_CONSTRAINT_MESSAGE)

        try:
            user = self.store.save(User(username=username, password=password))
        except ConstraintViolation as exc:
            raise AlreadyExists() from exc

        logger.info("Registered user %s (id=%s)", user.username, user.id)
        return user

    def login(self, username: Optional[str], password: Optional[str]) -> User:
        """
        Return the user if the password matches exactly.

        Unknown usernames and wrong passwords both raise InvalidCredentials.
        """
        user = self.store.find_by_username(username)
        if user is None or user.password != password:
            logger.warning("Failed login attempt for %r", username)
            raise InvalidCredentials()
        return user
