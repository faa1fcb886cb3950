"""Profile representation shared by profile and invite responses."""

from datetime import datetime

from pydantic import BaseModel

from gatehouse.domain.model import Profile


class ProfileItem(BaseModel):
    """Profile as returned to callers."""

    profile_id: str
    name: str
    template_user_ref: str | None
    is_default: bool
    created_at: datetime
    invite_count: int | None = None  # Only filled in listings

    @classmethod
    def from_profile(
        cls, profile: Profile, invite_count: int | None = None
    ) -> "ProfileItem":
        return cls(
            profile_id=str(profile.id),
            name=profile.name.root,
            template_user_ref=profile.template_user_ref,
            is_default=profile.is_default,
            created_at=profile.created_at,
            invite_count=invite_count,
        )


class PublicProfileItem(BaseModel):
    """Profile as shown to callers without a session.

    The template reference is left out; it is only used by provisioning.
    """

    profile_id: str
    name: str

    @classmethod
    def from_profile(cls, profile: Profile) -> "PublicProfileItem":
        return cls(profile_id=str(profile.id), name=profile.name.root)
