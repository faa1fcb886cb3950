"""Profile repository interface."""

from abc import ABC, abstractmethod

from gatehouse.domain.model import Profile, ProfileSummary
from gatehouse.domain.value import ProfileId, ProfileName


class ProfileRepository(ABC):
    """Repository for Profile entity.

    Implementations must keep exactly one default profile visible to
    readers at all times once a profile exists.
    """

    @abstractmethod
    async def find_by_id(self, profile_id: ProfileId) -> Profile | None:
        """Find a profile by ID."""
        pass

    @abstractmethod
    async def find_by_name(self, name: ProfileName) -> Profile | None:
        """Find a profile by its unique name."""
        pass

    @abstractmethod
    async def find_default(self) -> Profile | None:
        """Find the default profile, if any profile exists."""
        pass

    @abstractmethod
    async def find_all_with_invite_counts(self) -> list[ProfileSummary]:
        """List profiles ordered by name, each with its invite count.

        The count is aggregated from referencing invites, not stored.
        """
        pass

    @abstractmethod
    async def create(self, profile: Profile) -> Profile:
        """Insert a new profile.

        Raises:
            IntegrityError: On a duplicate name, or a second default
        """
        pass

    @abstractmethod
    async def update(self, profile: Profile) -> Profile | None:
        """Update a profile's name and template reference.

        ``is_default`` is never written here; see ``set_default``.

        Returns:
            The updated profile, or None if it no longer exists

        Raises:
            IntegrityError: On a duplicate name
        """
        pass

    @abstractmethod
    async def delete_unreferenced(self, profile_id: ProfileId) -> bool:
        """Delete a profile that is neither default nor referenced by invites.

        The guards are part of the delete statement itself.

        Returns:
            True if the profile was deleted
        """
        pass

    @abstractmethod
    async def set_default(self, profile_id: ProfileId) -> bool:
        """Make a profile the only default.

        Clears every other default flag and sets the target's in one
        transaction, serialized against concurrent calls.

        Returns:
            False if the profile does not exist (nothing changes)
        """
        pass
