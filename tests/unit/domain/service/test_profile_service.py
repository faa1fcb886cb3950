"""Unit tests for ProfileService."""

import asyncio
from uuid import uuid4

import pytest

from gatehouse.domain.error import (
    ConflictError,
    ForbiddenError,
    InvalidOperationError,
    NotFoundError,
)
from gatehouse.domain.repository import ProfileRepository
from gatehouse.domain.service import InviteService, ProfileService
from gatehouse.domain.value import ProfileId, ProfileName, ProfilePatch
from tests.conftest import make_admin, make_member
from tests.harness import create_env_fixture

# Unit test fixture - in-memory persistence
unit_env = create_env_fixture()


async def default_ids(profile_repo: ProfileRepository) -> list[ProfileId]:
    summaries = await profile_repo.find_all_with_invite_counts()
    return [s.profile.id for s in summaries if s.profile.is_default]


class TestCreateProfile:
    """Tests for create_profile."""

    @pytest.mark.asyncio
    async def test_first_profile_becomes_default(self, unit_env):
        """The first profile is the default; later ones are not."""
        profile_service = await unit_env.get(ProfileService)

        first = await profile_service.create_profile(
            make_admin(), ProfileName("Standard"), template_user_ref="tmpl-user-1"
        )
        second = await profile_service.create_profile(
            make_admin(), ProfileName("Family")
        )

        assert first.is_default is True
        assert first.template_user_ref == "tmpl-user-1"
        assert second.is_default is False
        assert (await profile_service.get_default_profile()) == first

    @pytest.mark.asyncio
    async def test_duplicate_name_conflicts(self, unit_env):
        profile_service = await unit_env.get(ProfileService)
        await profile_service.create_profile(make_admin(), ProfileName("Standard"))

        with pytest.raises(ConflictError, match="already exists"):
            await profile_service.create_profile(
                make_admin(), ProfileName("Standard")
            )

    @pytest.mark.asyncio
    async def test_name_is_stripped(self, unit_env):
        profile_service = await unit_env.get(ProfileService)

        profile = await profile_service.create_profile(
            make_admin(), ProfileName("  Kids  ")
        )

        assert profile.name.root == "Kids"

    @pytest.mark.asyncio
    async def test_create_requires_admin(self, unit_env):
        profile_service = await unit_env.get(ProfileService)

        with pytest.raises(ForbiddenError):
            await profile_service.create_profile(make_member(), ProfileName("X"))

    @pytest.mark.asyncio
    async def test_concurrent_first_profiles_leave_one_default(self, unit_env):
        """Racing creations in an empty store never produce two defaults."""
        profile_service = await unit_env.get(ProfileService)
        profile_repo = await unit_env.get(ProfileRepository)

        results = await asyncio.gather(
            *(
                profile_service.create_profile(make_admin(), ProfileName(f"P{i}"))
                for i in range(5)
            ),
            return_exceptions=True,
        )

        assert len(await default_ids(profile_repo)) == 1
        assert all(
            not isinstance(r, Exception) or isinstance(r, ConflictError)
            for r in results
        )


class TestListAndGetProfiles:
    """Tests for list_profiles, get_profile and list_invites."""

    @pytest.mark.asyncio
    async def test_list_profiles_ordered_by_name_with_counts(self, unit_env):
        profile_service = await unit_env.get(ProfileService)
        invite_service = await unit_env.get(InviteService)
        standard = await profile_service.create_profile(
            make_admin(), ProfileName("Standard")
        )
        await profile_service.create_profile(make_admin(), ProfileName("Admin"))
        await invite_service.create_invite(make_admin(), standard.id)
        await invite_service.create_invite(make_admin(), standard.id)

        summaries = await profile_service.list_profiles(make_admin())

        assert [s.profile.name.root for s in summaries] == ["Admin", "Standard"]
        assert [s.invite_count for s in summaries] == [0, 2]

    @pytest.mark.asyncio
    async def test_list_profiles_requires_admin(self, unit_env):
        profile_service = await unit_env.get(ProfileService)

        with pytest.raises(ForbiddenError):
            await profile_service.list_profiles(make_member())

    @pytest.mark.asyncio
    async def test_get_profile_not_found(self, unit_env):
        profile_service = await unit_env.get(ProfileService)

        with pytest.raises(NotFoundError):
            await profile_service.get_profile(make_admin(), ProfileId(uuid4()))

    @pytest.mark.asyncio
    async def test_list_invites_for_profile(self, unit_env):
        profile_service = await unit_env.get(ProfileService)
        invite_service = await unit_env.get(InviteService)
        standard = await profile_service.create_profile(
            make_admin(), ProfileName("Standard")
        )
        other = await profile_service.create_profile(
            make_admin(), ProfileName("Other")
        )
        invite = await invite_service.create_invite(make_admin(), standard.id)
        await invite_service.create_invite(make_admin(), other.id)

        invites = await profile_service.list_invites(make_admin(), standard.id)

        assert [i.id for i in invites] == [invite.id]

    @pytest.mark.asyncio
    async def test_get_default_profile_empty_store(self, unit_env):
        profile_service = await unit_env.get(ProfileService)

        assert await profile_service.get_default_profile() is None


class TestUpdateProfile:
    """Tests for update_profile."""

    @pytest.mark.asyncio
    async def test_rename_profile(self, unit_env):
        profile_service = await unit_env.get(ProfileService)
        profile = await profile_service.create_profile(
            make_admin(), ProfileName("Standard"), template_user_ref="tmpl"
        )

        updated = await profile_service.update_profile(
            make_admin(), profile.id, ProfilePatch(name=ProfileName("Basic"))
        )

        assert updated.name.root == "Basic"
        assert updated.template_user_ref == "tmpl"
        assert updated.is_default is True

    @pytest.mark.asyncio
    async def test_rename_to_existing_name_conflicts(self, unit_env):
        profile_service = await unit_env.get(ProfileService)
        await profile_service.create_profile(make_admin(), ProfileName("Standard"))
        family = await profile_service.create_profile(
            make_admin(), ProfileName("Family")
        )

        with pytest.raises(ConflictError):
            await profile_service.update_profile(
                make_admin(), family.id, ProfilePatch(name=ProfileName("Standard"))
            )

    @pytest.mark.asyncio
    async def test_rename_to_own_name_is_allowed(self, unit_env):
        profile_service = await unit_env.get(ProfileService)
        profile = await profile_service.create_profile(
            make_admin(), ProfileName("Standard")
        )

        updated = await profile_service.update_profile(
            make_admin(), profile.id, ProfilePatch(name=ProfileName("Standard"))
        )

        assert updated.name.root == "Standard"

    @pytest.mark.asyncio
    async def test_clear_template_reference(self, unit_env):
        profile_service = await unit_env.get(ProfileService)
        profile = await profile_service.create_profile(
            make_admin(), ProfileName("Standard"), template_user_ref="tmpl"
        )

        updated = await profile_service.update_profile(
            make_admin(), profile.id, ProfilePatch(template_user_ref=None)
        )

        assert updated.template_user_ref is None
        assert updated.name.root == "Standard"

    @pytest.mark.asyncio
    async def test_clearing_name_is_invalid(self, unit_env):
        profile_service = await unit_env.get(ProfileService)
        profile = await profile_service.create_profile(
            make_admin(), ProfileName("Standard")
        )

        with pytest.raises(InvalidOperationError):
            await profile_service.update_profile(
                make_admin(), profile.id, ProfilePatch(name=None)
            )

    @pytest.mark.asyncio
    async def test_update_missing_profile(self, unit_env):
        profile_service = await unit_env.get(ProfileService)

        with pytest.raises(NotFoundError):
            await profile_service.update_profile(
                make_admin(), ProfileId(uuid4()), ProfilePatch(template_user_ref="x")
            )


class TestDeleteProfile:
    """Tests for delete_profile."""

    @pytest.mark.asyncio
    async def test_delete_unused_profile(self, unit_env):
        profile_service = await unit_env.get(ProfileService)
        await profile_service.create_profile(make_admin(), ProfileName("Standard"))
        spare = await profile_service.create_profile(
            make_admin(), ProfileName("Spare")
        )

        await profile_service.delete_profile(make_admin(), spare.id)

        with pytest.raises(NotFoundError):
            await profile_service.get_profile(make_admin(), spare.id)

    @pytest.mark.asyncio
    async def test_cannot_delete_default_profile(self, unit_env):
        profile_service = await unit_env.get(ProfileService)
        default = await profile_service.create_profile(
            make_admin(), ProfileName("Standard")
        )

        with pytest.raises(InvalidOperationError, match="default profile"):
            await profile_service.delete_profile(make_admin(), default.id)

    @pytest.mark.asyncio
    async def test_cannot_delete_profile_in_use(self, unit_env):
        """The refusal reports how many invites block the deletion."""
        profile_service = await unit_env.get(ProfileService)
        invite_service = await unit_env.get(InviteService)
        await profile_service.create_profile(make_admin(), ProfileName("Standard"))
        family = await profile_service.create_profile(
            make_admin(), ProfileName("Family")
        )
        await invite_service.create_invite(make_admin(), family.id)

        with pytest.raises(InvalidOperationError) as exc_info:
            await profile_service.delete_profile(make_admin(), family.id)

        assert exc_info.value.details()["invite_count"] == 1
        assert "1 invite" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_delete_after_invites_removed(self, unit_env):
        profile_service = await unit_env.get(ProfileService)
        invite_service = await unit_env.get(InviteService)
        await profile_service.create_profile(make_admin(), ProfileName("Standard"))
        family = await profile_service.create_profile(
            make_admin(), ProfileName("Family")
        )
        invite = await invite_service.create_invite(make_admin(), family.id)
        await invite_service.delete_invite(make_admin(), invite.id)

        await profile_service.delete_profile(make_admin(), family.id)

    @pytest.mark.asyncio
    async def test_delete_missing_profile(self, unit_env):
        profile_service = await unit_env.get(ProfileService)

        with pytest.raises(NotFoundError):
            await profile_service.delete_profile(make_admin(), ProfileId(uuid4()))


class TestSetDefault:
    """Tests for set_default."""

    @pytest.mark.asyncio
    async def test_set_default_moves_flag(self, unit_env):
        profile_service = await unit_env.get(ProfileService)
        a = await profile_service.create_profile(make_admin(), ProfileName("A"))
        b = await profile_service.create_profile(make_admin(), ProfileName("B"))

        await profile_service.set_default(make_admin(), b.id)

        a_now = await profile_service.get_profile(make_admin(), a.id)
        b_now = await profile_service.get_profile(make_admin(), b.id)
        assert a_now.is_default is False
        assert b_now.is_default is True

        # The former default can now be deleted
        await profile_service.delete_profile(make_admin(), a.id)

    @pytest.mark.asyncio
    async def test_set_default_is_idempotent(self, unit_env):
        profile_service = await unit_env.get(ProfileService)
        profile_repo = await unit_env.get(ProfileRepository)
        a = await profile_service.create_profile(make_admin(), ProfileName("A"))

        await profile_service.set_default(make_admin(), a.id)

        assert await default_ids(profile_repo) == [a.id]

    @pytest.mark.asyncio
    async def test_set_default_missing_profile(self, unit_env):
        profile_service = await unit_env.get(ProfileService)
        profile_repo = await unit_env.get(ProfileRepository)
        a = await profile_service.create_profile(make_admin(), ProfileName("A"))

        with pytest.raises(NotFoundError):
            await profile_service.set_default(make_admin(), ProfileId(uuid4()))

        assert await default_ids(profile_repo) == [a.id]

    @pytest.mark.asyncio
    async def test_set_default_requires_admin(self, unit_env):
        profile_service = await unit_env.get(ProfileService)
        a = await profile_service.create_profile(make_admin(), ProfileName("A"))

        with pytest.raises(ForbiddenError):
            await profile_service.set_default(make_member(), a.id)

    @pytest.mark.asyncio
    async def test_concurrent_set_default_leaves_exactly_one(self, unit_env):
        """Racing set_default calls always end with a single default."""
        profile_service = await unit_env.get(ProfileService)
        profile_repo = await unit_env.get(ProfileRepository)
        profiles = [
            await profile_service.create_profile(make_admin(), ProfileName(f"P{i}"))
            for i in range(5)
        ]

        await asyncio.gather(
            *(
                profile_service.set_default(make_admin(), p.id)
                for p in profiles * 3
            )
        )

        defaults = await default_ids(profile_repo)
        assert len(defaults) == 1
        assert defaults[0] in {p.id for p in profiles}
