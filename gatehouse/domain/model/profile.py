"""Profile entity.

A profile is a named access template. Redeeming an invite grants the
invite's profile; the external provisioning system resolves the profile's
template user reference when it creates the media-server account.
"""

from datetime import datetime

from pydantic import Field

from gatehouse.domain.model.common import DomainModel, utc_now
from gatehouse.domain.value import ProfileId, ProfileName


class Profile(DomainModel):
    """Profile entity.

    Business rules:
    - Names are unique
    - Exactly one profile is the default once any profile exists
    - The default profile cannot be deleted
    - A profile referenced by invites cannot be deleted
    """

    id: ProfileId
    name: ProfileName
    template_user_ref: str | None = None  # Opaque, never dereferenced here
    is_default: bool = False
    created_at: datetime = Field(default_factory=utc_now)


class ProfileSummary(DomainModel):
    """Profile with the number of invites referencing it."""

    profile: Profile
    invite_count: int = 0
