"""Invite representation shared by invite responses."""

from datetime import datetime
from urllib.parse import quote

from pydantic import BaseModel

from gatehouse.domain.model import Invite
from gatehouse.domain.model.common import utc_now
from gatehouse.domain.value import InviteInvalidReason


class InviteItem(BaseModel):
    """Invite as returned to administrators."""

    invite_id: str
    code: str
    invite_url: str  # Registration link carrying the code
    profile_id: str
    profile_name: str | None = None
    created_by_id: str
    created_at: datetime
    expires_at: datetime | None
    max_uses: int | None
    usage_count: int
    remaining_uses: int | None
    valid: bool
    invalid_reason: InviteInvalidReason | None = None

    @classmethod
    def from_invite(
        cls,
        invite: Invite,
        frontend_url: str,
        profile_name: str | None = None,
    ) -> "InviteItem":
        """Build the item, deriving validity at the current time."""
        reason = invite.invalid_reason(utc_now())
        return cls(
            invite_id=str(invite.id),
            code=invite.code.root,
            invite_url=f"{frontend_url}/register?code={quote(invite.code.root)}",
            profile_id=str(invite.profile_id),
            profile_name=profile_name,
            created_by_id=str(invite.created_by_id),
            created_at=invite.created_at,
            expires_at=invite.expires_at,
            max_uses=invite.max_uses,
            usage_count=invite.usage_count,
            remaining_uses=invite.remaining_uses,
            valid=reason is None,
            invalid_reason=reason,
        )
