"""Invite routes."""

from datetime import datetime
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Path, status
from pydantic import BaseModel, Field

from gatehouse.application.usecase.invite import (
    ConsumeInviteRequest,
    ConsumeInviteResponse,
    ConsumeInviteUseCase,
    CreateInviteRequest,
    CreateInviteResponse,
    CreateInviteUseCase,
    DeleteInviteRequest,
    DeleteInviteResponse,
    DeleteInviteUseCase,
    GetInviteRequest,
    GetInviteResponse,
    GetInviteUseCase,
    ListInvitesRequest,
    ListInvitesResponse,
    ListInvitesUseCase,
    UpdateInviteRequest,
    UpdateInviteResponse,
    UpdateInviteUseCase,
    VerifyInviteRequest,
    VerifyInviteResponse,
    VerifyInviteUseCase,
)
from gatehouse.domain.service import JWTService
from gatehouse.domain.value import InvitePatch
from gatehouse.interface.api.auth import authenticate

router = APIRouter(prefix="/invites", tags=["invites"], route_class=DishkaRoute)

# Codes shorter than this are rejected before any lookup
MIN_CODE_LENGTH = 6
MAX_CODE_LENGTH = 255


class CreateInviteAPIRequest(BaseModel):
    """API request for creating an invite."""

    profile_id: UUID
    expires_at: datetime | None = None
    max_uses: int | None = None


class UpdateInviteAPIRequest(BaseModel):
    """API request for updating an invite.

    Omitted fields are left unchanged; ``null`` clears a field.
    """

    expires_at: datetime | None = None
    max_uses: int | None = None


class ConsumeInviteAPIRequest(BaseModel):
    """API request for redeeming an invite code."""

    code: str = Field(min_length=MIN_CODE_LENGTH, max_length=MAX_CODE_LENGTH)


@router.post(
    "", response_model=CreateInviteResponse, status_code=status.HTTP_201_CREATED
)
async def create_invite(
    request: CreateInviteAPIRequest,
    create_invite_use_case: FromDishka[CreateInviteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreateInviteResponse:
    """Create an invite bound to a profile.

    Args:
        request: Profile, optional expiry and optional usage limit
        create_invite_use_case: Create invite use case from DI
        jwt_service: JWT service from DI
        auth_token: JWT token from cookie

    Returns:
        Created invite with its registration link
    """
    actor = authenticate(jwt_service, auth_token)
    return await create_invite_use_case.execute(
        CreateInviteRequest(
            actor=actor,
            profile_id=str(request.profile_id),
            expires_at=request.expires_at,
            max_uses=request.max_uses,
        )
    )


@router.get("", response_model=ListInvitesResponse)
async def list_invites(
    list_invites_use_case: FromDishka[ListInvitesUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ListInvitesResponse:
    """List all invites, newest first."""
    actor = authenticate(jwt_service, auth_token)
    return await list_invites_use_case.execute(ListInvitesRequest(actor=actor))


@router.get("/verify/{code}", response_model=VerifyInviteResponse)
async def verify_invite(
    verify_invite_use_case: FromDishka[VerifyInviteUseCase],
    code: str = Path(min_length=MIN_CODE_LENGTH, max_length=MAX_CODE_LENGTH),
) -> VerifyInviteResponse:
    """Check whether a code can currently be redeemed.

    Public: called by the registration page before an account exists.
    Responds 404 for unknown codes, ``valid: false`` with a reason for
    expired or used-up ones.
    """
    return await verify_invite_use_case.execute(VerifyInviteRequest(code=code))


@router.post("/consume", response_model=ConsumeInviteResponse)
async def consume_invite(
    request: ConsumeInviteAPIRequest,
    consume_invite_use_case: FromDishka[ConsumeInviteUseCase],
) -> ConsumeInviteResponse:
    """Redeem one use of an invite code.

    Public: called by the registration flow once the account was created.
    Responds 404 for unknown codes, 400 for expired invites and 410 for
    invites at their usage limit.
    """
    return await consume_invite_use_case.execute(
        ConsumeInviteRequest(code=request.code)
    )


@router.get("/{invite_id}", response_model=GetInviteResponse)
async def get_invite(
    invite_id: UUID,
    get_invite_use_case: FromDishka[GetInviteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetInviteResponse:
    """Get a single invite."""
    actor = authenticate(jwt_service, auth_token)
    return await get_invite_use_case.execute(
        GetInviteRequest(actor=actor, invite_id=str(invite_id))
    )


@router.patch("/{invite_id}", response_model=UpdateInviteResponse)
async def update_invite(
    invite_id: UUID,
    request: UpdateInviteAPIRequest,
    update_invite_use_case: FromDishka[UpdateInviteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> UpdateInviteResponse:
    """Change an invite's expiry and/or usage limit.

    Args:
        invite_id: Invite UUID
        request: Fields to change; omitted fields are kept
        update_invite_use_case: Update invite use case from DI
        jwt_service: JWT service from DI
        auth_token: JWT token from cookie

    Returns:
        Updated invite
    """
    actor = authenticate(jwt_service, auth_token)
    patch = InvitePatch(**request.model_dump(exclude_unset=True))
    return await update_invite_use_case.execute(
        UpdateInviteRequest(actor=actor, invite_id=str(invite_id), patch=patch)
    )


@router.delete("/{invite_id}", response_model=DeleteInviteResponse)
async def delete_invite(
    invite_id: UUID,
    delete_invite_use_case: FromDishka[DeleteInviteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteInviteResponse:
    """Delete an invite."""
    actor = authenticate(jwt_service, auth_token)
    return await delete_invite_use_case.execute(
        DeleteInviteRequest(actor=actor, invite_id=str(invite_id))
    )
