"""Password hashing and JWT creation/verification for authentication."""

from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
import jwt

from portfolio.core.config import settings

# Bcrypt cost (rounds); 12 is a good default for security vs speed.
BCRYPT_ROUNDS = 12


class InvalidTokenError(Exception):
    """Raised when a bearer token is malformed, tampered with or carries no usable subject."""

    def __init__(self, message: str = "Invalid token") -> None:
        self.message = message
        super().__init__(message)


class ExpiredTokenError(InvalidTokenError):
    """Raised when a correctly signed token is past its expiry."""

    def __init__(self, message: str = "Token expired") -> None:
        super().__init__(message)


def hash_password(plain_password: str) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    # bcrypt has a 72-byte limit; truncate to avoid errors.
    pw_bytes = plain_password.encode("utf-8")[:72]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=BCRYPT_ROUNDS)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    pw_bytes = plain_password.encode("utf-8")[:72]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def create_access_token(user_id: int, now: datetime | None = None) -> str:
    """Create a JWT access token for user_id, valid for JWT_EXPIRE_HOURS."""
    now = now or datetime.now(UTC)
    expire = now + timedelta(hours=settings.JWT_EXPIRE_HOURS)
    payload: dict[str, Any] = {
        "sub": str(user_id),
        "exp": expire,
        "iat": now,
    }
    secret = settings.JWT_SECRET.get_secret_value()
    return jwt.encode(
        payload,
        secret,
        algorithm=settings.JWT_ALGORITHM,
    )


def decode_access_token(token: str) -> int:
    """
    Decode and validate a JWT; return the user id it was issued for.
    Raises ExpiredTokenError past exp, InvalidTokenError for anything else.
    """
    secret = settings.JWT_SECRET.get_secret_value()
    try:
        payload = jwt.decode(
            token,
            secret,
            algorithms=[settings.JWT_ALGORITHM],
            options={"require": ["exp", "sub"]},
        )
    except jwt.ExpiredSignatureError as e:
        raise ExpiredTokenError() from e
    except jwt.PyJWTError as e:
        raise InvalidTokenError() from e

    try:
        return int(payload["sub"])
    except (TypeError, ValueError) as e:
        raise InvalidTokenError("Invalid token payload") from e
