# File: app/core/exceptions.py

"""
Error types raised by the credential store and the auth service.

Each error carries the message that the HTTP layer hands back to the
client, so routes never have to build their own wording.
"""


class AuthError(Exception):
    """Base class for every register/login failure."""

    default_message = "Authentication error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class AlreadyExists(AuthError):
    default_message = "User already exists"


class ValidationError(AuthError):
    default_message = "Invalid credentials format"


class InvalidCredentials(AuthError):
    default_message = "Invalid credentials"


class ConstraintViolation(AuthError):
    """The storage layer rejected a write (e.g. UNIQUE on username)."""

    default_message = "Constraint violation"
