"""Domain model entities for Gatehouse."""

from gatehouse.domain.model.invite import (
    Invite,
    InviteSummary,
    InviteVerification,
    Redemption,
)
from gatehouse.domain.model.profile import Profile, ProfileSummary

__all__ = [
    "Invite",
    "InviteSummary",
    "InviteVerification",
    "Profile",
    "ProfileSummary",
    "Redemption",
]
