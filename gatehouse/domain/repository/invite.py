"""Invite repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime

from gatehouse.domain.model import Invite, InviteSummary
from gatehouse.domain.value import InviteCode, InviteId, ProfileId


class InviteRepository(ABC):
    """Repository for Invite entity.

    Defines the contract for invite persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, invite_id: InviteId) -> Invite | None:
        """Find an invite by ID.

        Args:
            invite_id: The invite's unique identifier

        Returns:
            The invite if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_code(self, code: InviteCode) -> Invite | None:
        """Find an invite by its redemption code.

        Args:
            code: The invite code

        Returns:
            The invite if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> list[InviteSummary]:
        """List every invite with its profile name, newest first.

        Unpaginated; the table grows with every invite ever created.
        """
        pass

    @abstractmethod
    async def find_by_profile(self, profile_id: ProfileId) -> list[Invite]:
        """List invites granting a profile, newest first."""
        pass

    @abstractmethod
    async def count_by_profile(self, profile_id: ProfileId) -> int:
        """Count invites referencing a profile."""
        pass

    @abstractmethod
    async def create(self, invite: Invite) -> Invite:
        """Insert a new invite.

        A failed insert leaves the surrounding transaction usable, so the
        caller can retry with a fresh code.

        Args:
            invite: The invite to insert

        Returns:
            The inserted invite

        Raises:
            IntegrityError: If the code is already taken
        """
        pass

    @abstractmethod
    async def update_limits(
        self,
        invite_id: InviteId,
        expires_at: datetime | None,
        max_uses: int | None,
    ) -> Invite | None:
        """Replace an invite's expiry and usage limit.

        The write is conditional on the stored ``usage_count`` not exceeding
        the new ``max_uses``, evaluated atomically with the write.

        Args:
            invite_id: Invite to update
            expires_at: New expiry (None = never expires)
            max_uses: New usage limit (None = unlimited)

        Returns:
            The updated invite, or None if the invite is missing or its
            usage count already exceeds the new limit
        """
        pass

    @abstractmethod
    async def increment_usage(self, code: InviteCode, now: datetime) -> Invite | None:
        """Atomically redeem one use of a code.

        Increments ``usage_count`` by exactly one, only if the invite is
        unexpired at ``now`` and below its usage limit. Check and increment
        happen in a single conditional write, so concurrent redemptions can
        never push ``usage_count`` past ``max_uses``.

        Args:
            code: The invite code
            now: Redemption time used for the expiry check

        Returns:
            The updated invite, or None if no row was affected
        """
        pass

    @abstractmethod
    async def delete(self, invite_id: InviteId) -> bool:
        """Delete an invite.

        Returns:
            True if a row was deleted
        """
        pass
