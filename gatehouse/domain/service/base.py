"""Base service class for domain services."""

import logfire

from gatehouse.domain.error import ForbiddenError
from gatehouse.domain.value import Actor


class Service:
    """Base class for all domain services.

    Domain services contain business logic that doesn't naturally belong
    to a single entity or spans multiple entities/aggregates.
    """

    @staticmethod
    def require_admin(actor: Actor, action: str) -> None:
        """Gate an admin-only operation.

        Args:
            actor: Authenticated caller
            action: Human-readable action for the error message

        Raises:
            ForbiddenError: If the caller is not an administrator
        """
        if not actor.is_admin:
            logfire.warn(
                "Non-admin attempted admin operation",
                user_id=str(actor.user_id),
                action=action,
            )
            raise ForbiddenError(action)
