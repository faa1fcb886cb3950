"""Profile routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel, Field

from gatehouse.application.usecase.profile import (
    CreateProfileRequest,
    CreateProfileResponse,
    CreateProfileUseCase,
    DeleteProfileRequest,
    DeleteProfileResponse,
    DeleteProfileUseCase,
    GetDefaultProfileRequest,
    GetDefaultProfileResponse,
    GetDefaultProfileUseCase,
    GetProfileRequest,
    GetProfileResponse,
    GetProfileUseCase,
    ListProfileInvitesRequest,
    ListProfileInvitesResponse,
    ListProfileInvitesUseCase,
    ListProfilesRequest,
    ListProfilesResponse,
    ListProfilesUseCase,
    SetDefaultProfileRequest,
    SetDefaultProfileResponse,
    SetDefaultProfileUseCase,
    UpdateProfileRequest,
    UpdateProfileResponse,
    UpdateProfileUseCase,
)
from gatehouse.domain.service import JWTService
from gatehouse.domain.value import ProfilePatch
from gatehouse.interface.api.auth import authenticate

router = APIRouter(prefix="/profiles", tags=["profiles"], route_class=DishkaRoute)


class CreateProfileAPIRequest(BaseModel):
    """API request for creating a profile."""

    name: str = Field(min_length=1, max_length=100)
    template_user_ref: str | None = Field(default=None, max_length=255)


class UpdateProfileAPIRequest(BaseModel):
    """API request for updating a profile.

    Omitted fields are left unchanged; ``template_user_ref: null`` clears
    the reference.
    """

    name: str | None = Field(default=None, min_length=1, max_length=100)
    template_user_ref: str | None = Field(default=None, max_length=255)


@router.post(
    "", response_model=CreateProfileResponse, status_code=status.HTTP_201_CREATED
)
async def create_profile(
    request: CreateProfileAPIRequest,
    create_profile_use_case: FromDishka[CreateProfileUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreateProfileResponse:
    """Create a profile.

    The first profile created becomes the default.
    """
    actor = authenticate(jwt_service, auth_token)
    return await create_profile_use_case.execute(
        CreateProfileRequest(
            actor=actor,
            name=request.name,
            template_user_ref=request.template_user_ref,
        )
    )


@router.get("", response_model=ListProfilesResponse)
async def list_profiles(
    list_profiles_use_case: FromDishka[ListProfilesUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ListProfilesResponse:
    """List profiles by name, with invite counts."""
    actor = authenticate(jwt_service, auth_token)
    return await list_profiles_use_case.execute(ListProfilesRequest(actor=actor))


@router.get("/default", response_model=GetDefaultProfileResponse)
async def get_default_profile(
    get_default_profile_use_case: FromDishka[GetDefaultProfileUseCase],
) -> GetDefaultProfileResponse:
    """Get the default profile.

    Public: the registration flow uses it when nothing else names a
    profile.
    """
    return await get_default_profile_use_case.execute(GetDefaultProfileRequest())


@router.get("/{profile_id}", response_model=GetProfileResponse)
async def get_profile(
    profile_id: UUID,
    get_profile_use_case: FromDishka[GetProfileUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetProfileResponse:
    """Get a profile with its invite count."""
    actor = authenticate(jwt_service, auth_token)
    return await get_profile_use_case.execute(
        GetProfileRequest(actor=actor, profile_id=str(profile_id))
    )


@router.patch("/{profile_id}", response_model=UpdateProfileResponse)
async def update_profile(
    profile_id: UUID,
    request: UpdateProfileAPIRequest,
    update_profile_use_case: FromDishka[UpdateProfileUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> UpdateProfileResponse:
    """Rename a profile or change its template reference."""
    actor = authenticate(jwt_service, auth_token)
    patch = ProfilePatch(**request.model_dump(exclude_unset=True))
    return await update_profile_use_case.execute(
        UpdateProfileRequest(actor=actor, profile_id=str(profile_id), patch=patch)
    )


@router.delete("/{profile_id}", response_model=DeleteProfileResponse)
async def delete_profile(
    profile_id: UUID,
    delete_profile_use_case: FromDishka[DeleteProfileUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteProfileResponse:
    """Delete a profile.

    Refused with 400 while the profile is the default or still granted by
    invites; the response then carries ``invite_count``.
    """
    actor = authenticate(jwt_service, auth_token)
    return await delete_profile_use_case.execute(
        DeleteProfileRequest(actor=actor, profile_id=str(profile_id))
    )


@router.post("/{profile_id}/default", response_model=SetDefaultProfileResponse)
async def set_default_profile(
    profile_id: UUID,
    set_default_profile_use_case: FromDishka[SetDefaultProfileUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> SetDefaultProfileResponse:
    """Make a profile the default."""
    actor = authenticate(jwt_service, auth_token)
    return await set_default_profile_use_case.execute(
        SetDefaultProfileRequest(actor=actor, profile_id=str(profile_id))
    )


@router.get("/{profile_id}/invites", response_model=ListProfileInvitesResponse)
async def list_profile_invites(
    profile_id: UUID,
    list_profile_invites_use_case: FromDishka[ListProfileInvitesUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ListProfileInvitesResponse:
    """List the invites granting a profile."""
    actor = authenticate(jwt_service, auth_token)
    return await list_profile_invites_use_case.execute(
        ListProfileInvitesRequest(actor=actor, profile_id=str(profile_id))
    )
