"""Session cookie authentication for admin routes."""

from fastapi import HTTPException, status

from gatehouse.domain.service import JWTService
from gatehouse.domain.value import Actor
from gatehouse.util.jwt import JWTError


def authenticate(jwt_service: JWTService, auth_token: str | None) -> Actor:
    """Resolve the ``auth_token`` cookie to the calling actor.

    Only authenticates; whether the actor may perform an operation is
    decided by the domain services.

    Raises:
        HTTPException: 401 if the cookie is missing or the token is invalid
    """
    if not auth_token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )

    try:
        return jwt_service.get_actor(auth_token)
    except JWTError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        )
