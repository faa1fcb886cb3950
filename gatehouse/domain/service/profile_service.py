"""Profile domain service."""

from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from gatehouse.domain.error import (
    ConflictError,
    InvalidOperationError,
    NotFoundError,
)
from gatehouse.domain.model import Invite, Profile, ProfileSummary
from gatehouse.domain.model.common import utc_now
from gatehouse.domain.repository import InviteRepository, ProfileRepository
from gatehouse.domain.value import Actor, ProfileId, ProfileName, ProfilePatch

from .base import Service


class ProfileService(Service):
    """Domain service for profiles and the single-default invariant."""

    def __init__(
        self,
        profile_repository: ProfileRepository,
        invite_repository: InviteRepository,
    ) -> None:
        """Initialize profile service.

        Args:
            profile_repository: Profile repository
            invite_repository: Invite repository, for reference counts
        """
        self.profile_repository = profile_repository
        self.invite_repository = invite_repository

    async def find_profile(self, profile_id: ProfileId) -> Profile | None:
        """Look up a profile without an authorization check.

        For collaborators such as the invite service; not exposed to
        callers directly.
        """
        return await self.profile_repository.find_by_id(profile_id)

    async def get_default_profile(self) -> Profile | None:
        """Get the profile applied when nothing else specifies one."""
        with logfire.span("profile_service.get_default_profile"):
            return await self.profile_repository.find_default()

    async def get_profile(self, actor: Actor, profile_id: ProfileId) -> Profile:
        """Get a profile by ID.

        Raises:
            ForbiddenError: If the caller is not an administrator
            NotFoundError: If the profile does not exist
        """
        with logfire.span("profile_service.get_profile", profile_id=str(profile_id)):
            self.require_admin(actor, "view profiles")
            profile = await self.profile_repository.find_by_id(profile_id)
            if profile is None:
                raise NotFoundError("Profile", str(profile_id))
            return profile

    async def list_profiles(self, actor: Actor) -> list[ProfileSummary]:
        """List profiles with their invite counts, ordered by name."""
        with logfire.span("profile_service.list_profiles"):
            self.require_admin(actor, "list profiles")
            profiles = await self.profile_repository.find_all_with_invite_counts()
            logfire.info("Profiles listed", count=len(profiles))
            return profiles

    async def list_invites(self, actor: Actor, profile_id: ProfileId) -> list[Invite]:
        """List invites granting a profile, newest first.

        Raises:
            NotFoundError: If the profile does not exist
        """
        with logfire.span("profile_service.list_invites", profile_id=str(profile_id)):
            self.require_admin(actor, "view profile invites")
            if await self.profile_repository.find_by_id(profile_id) is None:
                raise NotFoundError("Profile", str(profile_id))
            return await self.invite_repository.find_by_profile(profile_id)

    async def create_profile(
        self,
        actor: Actor,
        name: ProfileName,
        template_user_ref: str | None = None,
    ) -> Profile:
        """Create a profile.

        The first profile in an empty store becomes the default so that a
        default exists as soon as any profile does; later profiles are
        always created non-default.

        Raises:
            ForbiddenError: If the caller is not an administrator
            ConflictError: If the name is taken
        """
        with logfire.span("profile_service.create_profile", name=name.root):
            self.require_admin(actor, "create profiles")

            if await self.profile_repository.find_by_name(name) is not None:
                logfire.warn("Duplicate profile name", name=name.root)
                raise ConflictError(f"A profile named '{name.root}' already exists")

            is_first = await self.profile_repository.find_default() is None
            profile = Profile(
                id=ProfileId(uuid4()),
                name=name,
                template_user_ref=template_user_ref,
                is_default=is_first,
                created_at=utc_now(),
            )

            try:
                saved = await self.profile_repository.create(profile)
            except IntegrityError:
                # Lost a race against a concurrent create
                if await self.profile_repository.find_by_name(name) is not None:
                    raise ConflictError(
                        f"A profile named '{name.root}' already exists"
                    )
                raise ConflictError(
                    "Another profile became the default concurrently, retry"
                )

            logfire.info(
                "Profile created",
                profile_id=str(saved.id),
                name=saved.name.root,
                is_default=saved.is_default,
            )
            return saved

    async def update_profile(
        self, actor: Actor, profile_id: ProfileId, patch: ProfilePatch
    ) -> Profile:
        """Rename a profile and/or change its template reference.

        Raises:
            ForbiddenError: If the caller is not an administrator
            NotFoundError: If the profile does not exist
            ConflictError: If the new name belongs to another profile
            InvalidOperationError: If the name is explicitly cleared
        """
        with logfire.span(
            "profile_service.update_profile",
            profile_id=str(profile_id),
            fields=sorted(patch.model_fields_set),
        ):
            self.require_admin(actor, "update profiles")

            profile = await self.profile_repository.find_by_id(profile_id)
            if profile is None:
                raise NotFoundError("Profile", str(profile_id))

            changes: dict = {}
            if "name" in patch.model_fields_set:
                if patch.name is None:
                    raise InvalidOperationError("Profile name cannot be cleared")
                other = await self.profile_repository.find_by_name(patch.name)
                if other is not None and other.id != profile_id:
                    raise ConflictError(
                        f"A profile named '{patch.name.root}' already exists"
                    )
                changes["name"] = patch.name
            if "template_user_ref" in patch.model_fields_set:
                changes["template_user_ref"] = patch.template_user_ref

            if not changes:
                return profile

            try:
                updated = await self.profile_repository.update(
                    profile.model_copy(update=changes)
                )
            except IntegrityError:
                raise ConflictError("A profile with that name already exists")

            if updated is None:
                raise NotFoundError("Profile", str(profile_id))

            logfire.info("Profile updated", profile_id=str(profile_id))
            return updated

    async def delete_profile(self, actor: Actor, profile_id: ProfileId) -> None:
        """Delete a profile that is neither default nor used by invites.

        Raises:
            ForbiddenError: If the caller is not an administrator
            NotFoundError: If the profile does not exist
            InvalidOperationError: If the profile is the default or is
                referenced by invites (``invite_count`` is reported)
        """
        with logfire.span("profile_service.delete_profile", profile_id=str(profile_id)):
            self.require_admin(actor, "delete profiles")

            await self._ensure_deletable(profile_id)

            try:
                deleted = await self.profile_repository.delete_unreferenced(profile_id)
            except IntegrityError:
                deleted = False

            if not deleted:
                # State changed between the check and the delete
                await self._ensure_deletable(profile_id)
                raise InvalidOperationError(
                    "Profile changed while being deleted, retry"
                )

            logfire.info("Profile deleted", profile_id=str(profile_id))

    async def set_default(self, actor: Actor, profile_id: ProfileId) -> None:
        """Make a profile the one and only default.

        Raises:
            ForbiddenError: If the caller is not an administrator
            NotFoundError: If the profile does not exist
        """
        with logfire.span("profile_service.set_default", profile_id=str(profile_id)):
            self.require_admin(actor, "set the default profile")

            if not await self.profile_repository.set_default(profile_id):
                raise NotFoundError("Profile", str(profile_id))

            logfire.info("Default profile changed", profile_id=str(profile_id))

    async def _ensure_deletable(self, profile_id: ProfileId) -> None:
        profile = await self.profile_repository.find_by_id(profile_id)
        if profile is None:
            raise NotFoundError("Profile", str(profile_id))

        if profile.is_default:
            logfire.warn("Refused to delete default profile", profile_id=str(profile_id))
            raise InvalidOperationError(
                "Cannot delete the default profile. "
                "Set another profile as default first."
            )

        invite_count = await self.invite_repository.count_by_profile(profile_id)
        if invite_count > 0:
            logfire.warn(
                "Refused to delete referenced profile",
                profile_id=str(profile_id),
                invite_count=invite_count,
            )
            raise InvalidOperationError(
                f"Cannot delete profile as it is used by {invite_count} invite(s)",
                invite_count=invite_count,
            )
