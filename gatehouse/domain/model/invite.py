"""Invite entity.

Invites gate registration: a prospective user needs a code that exists,
has not expired and still has uses left. Validity is always derived from
``expires_at``, ``max_uses`` and ``usage_count``; no status is stored.
"""

from datetime import datetime

from pydantic import Field

from gatehouse.domain.model.common import DomainModel, utc_now
from gatehouse.domain.model.profile import Profile
from gatehouse.domain.value import (
    InviteCode,
    InviteId,
    InviteInvalidReason,
    ProfileId,
    UserId,
)


class Invite(DomainModel):
    """Invite entity.

    Business rules:
    - ``code`` is globally unique and never changes
    - ``usage_count`` never exceeds ``max_uses`` when a limit is set
    - ``expires_at=None`` never expires, ``max_uses=None`` is unlimited
    """

    id: InviteId
    code: InviteCode
    profile_id: ProfileId
    created_by_id: UserId
    created_at: datetime = Field(default_factory=utc_now)
    expires_at: datetime | None = None
    max_uses: int | None = None
    usage_count: int = 0

    def is_expired(self, now: datetime) -> bool:
        """Whether the invite expired strictly before ``now``."""
        return self.expires_at is not None and self.expires_at < now

    def is_exhausted(self) -> bool:
        """Whether the usage limit has been reached."""
        return self.max_uses is not None and self.usage_count >= self.max_uses

    def invalid_reason(self, now: datetime) -> InviteInvalidReason | None:
        """Derive why the invite cannot be redeemed at ``now``.

        Expiry is checked before the usage limit, so an invite that is
        both expired and exhausted reports ``EXPIRED``.

        Returns:
            The reason, or None if the invite is redeemable
        """
        if self.is_expired(now):
            return InviteInvalidReason.EXPIRED
        if self.is_exhausted():
            return InviteInvalidReason.MAX_USES_REACHED
        return None

    @property
    def remaining_uses(self) -> int | None:
        """Uses left, or None when unlimited."""
        if self.max_uses is None:
            return None
        return max(0, self.max_uses - self.usage_count)


class InviteSummary(DomainModel):
    """Invite together with its profile's display name."""

    invite: Invite
    profile_name: str


class InviteVerification(DomainModel):
    """Read-only validity check result for a code."""

    valid: bool
    reason: InviteInvalidReason | None = None
    profile: Profile | None = None


class Redemption(DomainModel):
    """Result of a successful redemption."""

    success: bool = True
    invite: Invite
    profile: Profile
