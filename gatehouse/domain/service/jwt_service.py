"""JWT token domain service."""

from uuid import UUID

import logfire

from gatehouse.config import AuthSettings
from gatehouse.domain.value import Actor, UserId
from gatehouse.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for session token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, user_id: str, name: str | None, is_admin: bool) -> str:
        """Create a session token.

        Tokens are normally issued by the surrounding application; this is
        used by tests and tooling.
        """
        with logfire.span("jwt_service.create_token", user_id=user_id):
            return create_token(user_id, name, is_admin, self.auth_settings)

    def verify_token(self, token: str) -> TokenPayload:
        """Verify a session token and extract its payload.

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
                logfire.info(
                    "JWT token verified",
                    user_id=payload.user_id,
                    is_admin=payload.is_admin,
                )
                return payload
            except JWTError as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise

    def get_actor(self, token: str) -> Actor:
        """Resolve a session token to the calling actor.

        Raises:
            JWTError: If the token is invalid, expired or has a malformed
                user id
        """
        payload = self.verify_token(token)
        try:
            user_id = UserId(UUID(payload.user_id))
        except ValueError:
            raise JWTError("Invalid token")
        return Actor(user_id=user_id, is_admin=payload.is_admin)
