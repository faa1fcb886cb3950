"""In-memory invite repository for testing."""

import asyncio
from datetime import datetime
from typing import Optional

from sqlalchemy.exc import IntegrityError

from gatehouse.domain.model import Invite, InviteSummary
from gatehouse.domain.repository import InviteRepository
from gatehouse.domain.value import InviteCode, InviteId, ProfileId

from .store import InMemoryStore


class InMemoryInviteRepository(InviteRepository):
    """In-memory implementation of InviteRepository for testing.

    Each mutating method yields to the event loop once, like a database
    round trip would, and then checks and writes without awaiting, so the
    check and the write are atomic with respect to other tasks.
    """

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self.store = store or InMemoryStore()

    async def find_by_id(self, invite_id: InviteId) -> Optional[Invite]:
        """Find an invite by ID."""
        return self.store.invites.get(invite_id)

    async def find_by_code(self, code: InviteCode) -> Optional[Invite]:
        """Find an invite by code."""
        for invite in self.store.invites.values():
            if invite.code == code:
                return invite
        return None

    async def find_all(self) -> list[InviteSummary]:
        """List all invites with profile names, newest first."""
        summaries = []
        for invite in self._newest_first(self.store.invites.values()):
            profile = self.store.profiles.get(invite.profile_id)
            summaries.append(
                InviteSummary(
                    invite=invite,
                    profile_name=profile.name.root if profile else "",
                )
            )
        return summaries

    async def find_by_profile(self, profile_id: ProfileId) -> list[Invite]:
        """List invites granting a profile, newest first."""
        return self._newest_first(
            invite
            for invite in self.store.invites.values()
            if invite.profile_id == profile_id
        )

    async def count_by_profile(self, profile_id: ProfileId) -> int:
        """Count invites referencing a profile."""
        return sum(
            1
            for invite in self.store.invites.values()
            if invite.profile_id == profile_id
        )

    async def create(self, invite: Invite) -> Invite:
        """Insert an invite.

        Raises:
            IntegrityError: If the code is taken or the profile is missing
        """
        await asyncio.sleep(0)
        if any(existing.code == invite.code for existing in self.store.invites.values()):
            raise IntegrityError("Duplicate invite code", None, Exception())
        if invite.profile_id not in self.store.profiles:
            raise IntegrityError("Unknown profile", None, Exception())
        self.store.invites[invite.id] = invite
        return invite

    async def update_limits(
        self,
        invite_id: InviteId,
        expires_at: datetime | None,
        max_uses: int | None,
    ) -> Optional[Invite]:
        """Replace expiry and limit if the limit still covers current usage."""
        await asyncio.sleep(0)
        invite = self.store.invites.get(invite_id)
        if invite is None:
            return None
        if max_uses is not None and invite.usage_count > max_uses:
            return None
        updated = invite.model_copy(
            update={"expires_at": expires_at, "max_uses": max_uses}
        )
        self.store.invites[invite_id] = updated
        return updated

    async def increment_usage(
        self, code: InviteCode, now: datetime
    ) -> Optional[Invite]:
        """Compare-and-increment the usage counter."""
        await asyncio.sleep(0)
        invite = await self.find_by_code(code)
        if invite is None or invite.invalid_reason(now) is not None:
            return None
        updated = invite.model_copy(update={"usage_count": invite.usage_count + 1})
        self.store.invites[invite.id] = updated
        return updated

    async def delete(self, invite_id: InviteId) -> bool:
        """Delete an invite."""
        await asyncio.sleep(0)
        return self.store.invites.pop(invite_id, None) is not None

    @staticmethod
    def _newest_first(invites) -> list[Invite]:
        return sorted(invites, key=lambda inv: inv.created_at, reverse=True)
