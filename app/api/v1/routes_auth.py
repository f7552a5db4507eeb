# File: app/api/v1/routes_auth.py

"""
Register / login endpoints.

Only translation happens here: request fields go into AuthService and its
exceptions come back out as HTTP errors.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.api.deps import get_auth_service
from app.core.exceptions import AuthError
from app.schemas.user import AuthResponse, UserCredentials
from app.services.auth_service import AuthService

router = APIRouter()


@router.post("/register", response_model=AuthResponse, summary="Register a new user")
def register(
    payload: UserCredentials,
    service: AuthService = Depends(get_auth_service),
):
    """
    Create a user from a JSON body ``{"username": ..., "password": ...}``.

    Validation and duplicate-username failures come back as 400 with the
    reason in ``detail``.
    """
    try:
        user = service.register(payload.username, payload.password)
    except AuthError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=exc.message,
        )
    return AuthResponse(message="Registration successful", username=user.username)


@router.post("/login", response_model=AuthResponse, summary="Check a username/password pair")
def login(
    username: Optional[str] = Query(None),
    password: Optional[str] = Query(None),
    service: AuthService = Depends(get_auth_service),
):
    """
    Credentials are taken as request parameters.

    Every failure is a 401 "Invalid credentials", whatever the cause.
    """
    try:
        user = service.login(username, password)
    except AuthError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
        )
    return AuthResponse(message="Login successful", username=user.username)
