"""JWT token utilities."""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel, ValidationError

from gatehouse.config import AuthSettings
from gatehouse.util.error import JWTError

__all__ = ["JWTError", "TokenPayload", "create_token", "verify_token"]


class TokenPayload(BaseModel):
    """JWT token payload."""

    user_id: str
    name: str | None = None
    is_admin: bool = False
    exp: datetime


def create_token(
    user_id: str, name: str | None, is_admin: bool, settings: AuthSettings
) -> str:
    """Create a session token.

    Args:
        user_id: User ID
        name: Display name
        is_admin: Whether the user administers the media server
        settings: Authentication settings

    Returns:
        Encoded JWT token
    """
    expiry = datetime.now(timezone.utc) + timedelta(days=settings.jwt_expiry_days)

    payload = {
        "user_id": user_id,
        "name": name,
        "is_admin": is_admin,
        "exp": expiry,
    }

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a session token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except (jwt.InvalidTokenError, ValidationError):
        raise JWTError("Invalid token")
