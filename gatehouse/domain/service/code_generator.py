"""Invite code generation."""

import secrets

from gatehouse.domain.value import InviteCode


class CodeGenerator:
    """Produces fixed-length, URL-safe, unguessable invite codes.

    Uniqueness is not checked here: the store's unique constraint on the
    code rejects the (negligibly likely) collision and the invite service
    retries with a fresh code.
    """

    def __init__(self, num_bytes: int = 12) -> None:
        """Initialize generator.

        Args:
            num_bytes: Random bytes per code; multiples of 3 yield codes of
                exactly ``num_bytes * 4 / 3`` characters
        """
        self.num_bytes = num_bytes

    def generate(self) -> InviteCode:
        """Generate a new code."""
        return InviteCode(secrets.token_urlsafe(self.num_bytes))
