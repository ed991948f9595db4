"""Request/response schemas for auth endpoints."""

from pydantic import BaseModel, Field

from portfolio.schemas.common import CamelModel


class LoginRequest(BaseModel):
    """Credentials for login."""

    username: str = Field(..., min_length=1, max_length=255, description="Username")
    password: str = Field(..., min_length=1, max_length=128, description="Password")


class PublicUser(CamelModel):
    """User projection returned on login (never includes the password hash)."""

    id: int
    username: str
    email: str
    is_admin: bool


class LoginResponse(BaseModel):
    """JWT returned after successful login, with the logged-in user."""

    token: str = Field(..., description="JWT bearer token, valid for 24 hours")
    user: PublicUser


class CurrentUser(CamelModel):
    """Authenticated identity (id, username, isAdmin) attached to a request."""

    id: int
    username: str
    is_admin: bool


class VerifyResponse(BaseModel):
    """Response for GET /auth/verify."""

    user: CurrentUser
