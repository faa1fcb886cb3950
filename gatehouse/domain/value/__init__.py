"""Domain value objects for Gatehouse."""

from gatehouse.domain.value.identifiers import InviteId, ProfileId, UserId
from gatehouse.domain.value.types import (
    Actor,
    InviteCode,
    InviteInvalidReason,
    InvitePatch,
    ProfileName,
    ProfilePatch,
)

__all__ = [
    # Identifiers
    "InviteId",
    "ProfileId",
    "UserId",
    # Types
    "Actor",
    "InviteCode",
    "InviteInvalidReason",
    "InvitePatch",
    "ProfileName",
    "ProfilePatch",
]
