"""Tests for profile use cases."""

import pytest

from gatehouse.application.usecase.invite import (
    CreateInviteRequest,
    CreateInviteUseCase,
)
from gatehouse.application.usecase.profile import (
    CreateProfileRequest,
    CreateProfileUseCase,
    DeleteProfileRequest,
    DeleteProfileUseCase,
    GetDefaultProfileRequest,
    GetDefaultProfileUseCase,
    GetProfileRequest,
    GetProfileUseCase,
    ListProfileInvitesRequest,
    ListProfileInvitesUseCase,
    ListProfilesRequest,
    ListProfilesUseCase,
    SetDefaultProfileRequest,
    SetDefaultProfileUseCase,
    UpdateProfileRequest,
    UpdateProfileUseCase,
)
from gatehouse.domain.error import ConflictError, InvalidOperationError
from gatehouse.domain.value import ProfilePatch
from tests.conftest import make_admin
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def create_profile(env, name: str, template_user_ref: str | None = None):
    use_case = await env.get(CreateProfileUseCase)
    response = await use_case.execute(
        CreateProfileRequest(
            actor=make_admin(), name=name, template_user_ref=template_user_ref
        )
    )
    return response.profile


class TestProfileUseCases:
    """Tests for the profile use cases."""

    @pytest.mark.asyncio
    async def test_create_and_get_default(self, unit_env):
        created = await create_profile(unit_env, "Standard", "template-42")
        use_case = await unit_env.get(GetDefaultProfileUseCase)

        response = await use_case.execute(GetDefaultProfileRequest())

        assert created.is_default is True
        assert response.profile is not None
        assert response.profile.profile_id == created.profile_id
        assert response.profile.name == "Standard"
        assert "template_user_ref" not in response.profile.model_dump()

    @pytest.mark.asyncio
    async def test_get_default_without_profiles(self, unit_env):
        use_case = await unit_env.get(GetDefaultProfileUseCase)

        response = await use_case.execute(GetDefaultProfileRequest())

        assert response.profile is None

    @pytest.mark.asyncio
    async def test_invalid_name_rejected(self, unit_env):
        use_case = await unit_env.get(CreateProfileUseCase)

        with pytest.raises(ValueError):
            await use_case.execute(CreateProfileRequest(actor=make_admin(), name="   "))

    @pytest.mark.asyncio
    async def test_list_and_get_report_invite_counts(self, unit_env):
        standard = await create_profile(unit_env, "Standard")
        await create_profile(unit_env, "Admin")
        create_invite = await unit_env.get(CreateInviteUseCase)
        await create_invite.execute(
            CreateInviteRequest(actor=make_admin(), profile_id=standard.profile_id)
        )

        list_use_case = await unit_env.get(ListProfilesUseCase)
        get_use_case = await unit_env.get(GetProfileUseCase)
        listed = await list_use_case.execute(ListProfilesRequest(actor=make_admin()))
        fetched = await get_use_case.execute(
            GetProfileRequest(actor=make_admin(), profile_id=standard.profile_id)
        )

        assert [(p.name, p.invite_count) for p in listed.profiles] == [
            ("Admin", 0),
            ("Standard", 1),
        ]
        assert fetched.profile.invite_count == 1

    @pytest.mark.asyncio
    async def test_update_rename_conflict(self, unit_env):
        await create_profile(unit_env, "Standard")
        family = await create_profile(unit_env, "Family")
        use_case = await unit_env.get(UpdateProfileUseCase)

        with pytest.raises(ConflictError):
            await use_case.execute(
                UpdateProfileRequest(
                    actor=make_admin(),
                    profile_id=family.profile_id,
                    patch=ProfilePatch(name="Standard"),
                )
            )

    @pytest.mark.asyncio
    async def test_set_default_then_delete_previous_default(self, unit_env):
        a = await create_profile(unit_env, "A")
        b = await create_profile(unit_env, "B")
        set_default = await unit_env.get(SetDefaultProfileUseCase)
        delete = await unit_env.get(DeleteProfileUseCase)

        with pytest.raises(InvalidOperationError):
            await delete.execute(
                DeleteProfileRequest(actor=make_admin(), profile_id=a.profile_id)
            )

        await set_default.execute(
            SetDefaultProfileRequest(actor=make_admin(), profile_id=b.profile_id)
        )
        response = await delete.execute(
            DeleteProfileRequest(actor=make_admin(), profile_id=a.profile_id)
        )

        assert response.success is True

    @pytest.mark.asyncio
    async def test_list_profile_invites(self, unit_env):
        standard = await create_profile(unit_env, "Standard")
        create_invite = await unit_env.get(CreateInviteUseCase)
        created = await create_invite.execute(
            CreateInviteRequest(actor=make_admin(), profile_id=standard.profile_id)
        )
        use_case = await unit_env.get(ListProfileInvitesUseCase)

        response = await use_case.execute(
            ListProfileInvitesRequest(
                actor=make_admin(), profile_id=standard.profile_id
            )
        )

        assert response.total == 1
        assert response.invites[0].invite_id == created.invite.invite_id
        assert response.invites[0].profile_name == "Standard"
