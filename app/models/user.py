# File: app/models/user.py

"""
User model.

A user is just a username and the password exactly as it was submitted.
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import Base


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    # UNIQUE here is what actually guards against duplicate registrations
    username: Mapped[str] = mapped_column(String, unique=True, index=True, nullable=False)
    # Stored verbatim, no hashing; no length cap on either column
    password: Mapped[str] = mapped_column(String, nullable=False)

    def __repr__(self) -> str:
        return f"User(id={self.id!r}, username={self.username!r})"
