# File: app/schemas/user.py

from typing import Optional

from pydantic import BaseModel


class UserCredentials(BaseModel):
    # Both optional so that missing fields reach the empty-credentials check
    username: Optional[str] = None
    password: Optional[str] = None


class AuthResponse(BaseModel):
    message: str
    username: str
