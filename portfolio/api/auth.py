"""JWT login and auth dependencies (get_current_user, require_admin)."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from portfolio.core.database import get_db
from portfolio.core.security import (
    InvalidTokenError,
    create_access_token,
    decode_access_token,
    verify_password,
)
from portfolio.schemas.auth import (
    CurrentUser,
    LoginRequest,
    LoginResponse,
    PublicUser,
    VerifyResponse,
)
from portfolio.services.storage import UserStorage

logger = logging.getLogger(__name__)

router = APIRouter()
security = HTTPBearer(auto_error=False)

INVALID_CREDENTIALS = "Invalid credentials"


@router.post("/login", response_model=LoginResponse)
def login(
    body: LoginRequest,
    db: Annotated[Session, Depends(get_db)],
) -> LoginResponse:
    """
    Authenticate an admin with username and password; returns a JWT valid for 24 hours.
    Include the token in the Authorization header as: Bearer <token>
    """
    user = UserStorage(db).get_by_username(body.username)
    # Same response for unknown user, non-admin and wrong password.
    if user is None or not user.is_admin or not verify_password(body.password, user.password_hash):
        logger.info("Login failed", extra={"username": body.username[:255]})
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=INVALID_CREDENTIALS,
        )
    token = create_access_token(user.id)
    return LoginResponse(token=token, user=PublicUser.model_validate(user))


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[Session, Depends(get_db)],
) -> CurrentUser:
    """
    Dependency: require a valid Bearer JWT and return the current user.

    401 when no token is sent or its user no longer exists; 403 when the
    token fails verification (bad signature, malformed, expired).
    """
    if credentials is None or not credentials.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Access token required",
            headers={"WWW-Authenticate": "Bearer"},
        )
    try:
        user_id = decode_access_token(credentials.credentials)
    except InvalidTokenError:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid token",
        )
    user = UserStorage(db).get(user_id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return CurrentUser(id=user.id, username=user.username, is_admin=bool(user.is_admin))


def require_admin(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> CurrentUser:
    """Dependency: require an authenticated user with the admin flag. Raises 403 otherwise."""
    if not current_user.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    return current_user


@router.get("/verify", response_model=VerifyResponse)
def verify(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> VerifyResponse:
    """Return the identity behind the presented token."""
    return VerifyResponse(user=current_user)
