"""In-memory profile repository for testing."""

import asyncio
from typing import Optional

from sqlalchemy.exc import IntegrityError

from gatehouse.domain.model import Profile, ProfileSummary
from gatehouse.domain.repository import ProfileRepository
from gatehouse.domain.value import ProfileId, ProfileName

from .store import InMemoryStore


class InMemoryProfileRepository(ProfileRepository):
    """In-memory implementation of ProfileRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self.store = store or InMemoryStore()

    async def find_by_id(self, profile_id: ProfileId) -> Optional[Profile]:
        """Find a profile by ID."""
        return self.store.profiles.get(profile_id)

    async def find_by_name(self, name: ProfileName) -> Optional[Profile]:
        """Find a profile by name."""
        for profile in self.store.profiles.values():
            if profile.name == name:
                return profile
        return None

    async def find_default(self) -> Optional[Profile]:
        """Find the default profile."""
        for profile in self.store.profiles.values():
            if profile.is_default:
                return profile
        return None

    async def find_all_with_invite_counts(self) -> list[ProfileSummary]:
        """List profiles by name with invite counts."""
        counts: dict[ProfileId, int] = {}
        for invite in self.store.invites.values():
            counts[invite.profile_id] = counts.get(invite.profile_id, 0) + 1
        profiles = sorted(self.store.profiles.values(), key=lambda p: p.name.root)
        return [
            ProfileSummary(profile=profile, invite_count=counts.get(profile.id, 0))
            for profile in profiles
        ]

    async def create(self, profile: Profile) -> Profile:
        """Insert a profile.

        Raises:
            IntegrityError: On a duplicate name or a second default
        """
        await asyncio.sleep(0)
        for existing in self.store.profiles.values():
            if existing.name == profile.name:
                raise IntegrityError("Duplicate profile name", None, Exception())
            if existing.is_default and profile.is_default:
                raise IntegrityError("Second default profile", None, Exception())
        self.store.profiles[profile.id] = profile
        return profile

    async def update(self, profile: Profile) -> Optional[Profile]:
        """Update name and template reference."""
        await asyncio.sleep(0)
        current = self.store.profiles.get(profile.id)
        if current is None:
            return None
        for existing in self.store.profiles.values():
            if existing.id != profile.id and existing.name == profile.name:
                raise IntegrityError("Duplicate profile name", None, Exception())
        updated = current.model_copy(
            update={
                "name": profile.name,
                "template_user_ref": profile.template_user_ref,
            }
        )
        self.store.profiles[profile.id] = updated
        return updated

    async def delete_unreferenced(self, profile_id: ProfileId) -> bool:
        """Delete a non-default profile with no referencing invites."""
        await asyncio.sleep(0)
        profile = self.store.profiles.get(profile_id)
        if profile is None or profile.is_default:
            return False
        if any(i.profile_id == profile_id for i in self.store.invites.values()):
            return False
        del self.store.profiles[profile_id]
        return True

    async def set_default(self, profile_id: ProfileId) -> bool:
        """Clear every default flag and set the target's, atomically."""
        await asyncio.sleep(0)
        if profile_id not in self.store.profiles:
            return False
        for pid, profile in list(self.store.profiles.items()):
            should_be_default = pid == profile_id
            if profile.is_default != should_be_default:
                self.store.profiles[pid] = profile.model_copy(
                    update={"is_default": should_be_default}
                )
        return True
