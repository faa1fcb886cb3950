"""Mappers for converting between database rows and domain models.

Domain models are immutable Pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM.
"""

from typing import Any, Dict
from uuid import UUID

from gatehouse.domain.model import Invite, Profile
from gatehouse.domain.model.common import as_utc
from gatehouse.domain.value import (
    InviteCode,
    InviteId,
    ProfileId,
    ProfileName,
    UserId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_invite(row: Dict[str, Any]) -> Invite:
    """Convert database row to Invite domain model.

    Args:
        row: Database row as dict

    Returns:
        Invite domain model
    """
    return Invite(
        id=InviteId(_uuid(row["id"])),
        code=InviteCode(row["code"]),
        profile_id=ProfileId(_uuid(row["profile_id"])),
        created_by_id=UserId(_uuid(row["created_by_id"])),
        created_at=as_utc(row["created_at"]),
        expires_at=as_utc(row.get("expires_at")),
        max_uses=row.get("max_uses"),
        usage_count=row["usage_count"],
    )


def invite_to_dict(invite: Invite) -> Dict[str, Any]:
    """Convert Invite domain model to database dict.

    Args:
        invite: Invite domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return invite.model_dump()


def row_to_profile(row: Dict[str, Any]) -> Profile:
    """Convert database row to Profile domain model.

    Args:
        row: Database row as dict

    Returns:
        Profile domain model
    """
    return Profile(
        id=ProfileId(_uuid(row["id"])),
        name=ProfileName(row["name"]),
        template_user_ref=row.get("template_user_ref"),
        is_default=row["is_default"],
        created_at=as_utc(row["created_at"]),
    )


def profile_to_dict(profile: Profile) -> Dict[str, Any]:
    """Convert Profile domain model to database dict.

    Args:
        profile: Profile domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return profile.model_dump()
