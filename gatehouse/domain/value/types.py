"""Domain value objects for Gatehouse.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules.
"""

from datetime import datetime
from enum import Enum

from pydantic import Field, field_validator

from gatehouse.domain.value.common import RootValueObject, ValueObject
from gatehouse.domain.value.identifiers import UserId


class InviteInvalidReason(str, Enum):
    """Why an existing invite can no longer be redeemed.

    Reasons are derived from the invite's expiry and counters on every
    read; they are never stored.
    """

    EXPIRED = "expired"
    MAX_USES_REACHED = "max_uses_reached"


class InviteCode(RootValueObject[str]):
    """Opaque, URL-safe redemption key of an invite."""

    @field_validator("root")
    @classmethod
    def validate_code_format(cls, v: str) -> str:
        """Validate code is not empty."""
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Invite code must be 1-255 characters")
        return v

    def masked(self) -> str:
        """Code prefix safe to put in logs."""
        return self.root[:4] + "..."


class ProfileName(RootValueObject[str]):
    """Unique human-readable label of a profile."""

    @field_validator("root")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Strip whitespace and enforce length limits."""
        v = v.strip()
        if len(v) < 1 or len(v) > 100:
            raise ValueError("Profile name must be 1-100 characters")
        return v


class Actor(ValueObject):
    """Authenticated caller of an administrative operation."""

    user_id: UserId
    is_admin: bool = False


class InvitePatch(ValueObject):
    """Partial update of an invite's limits.

    Only fields explicitly set (``model_fields_set``) are applied; an
    explicit ``None`` clears the field.
    """

    expires_at: datetime | None = None
    max_uses: int | None = None


class ProfilePatch(ValueObject):
    """Partial update of a profile.

    Only fields explicitly set are applied; ``template_user_ref=None``
    clears the reference.
    """

    name: ProfileName | None = None
    template_user_ref: str | None = Field(default=None, max_length=255)
