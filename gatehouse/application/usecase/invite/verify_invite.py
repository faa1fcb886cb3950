"""Verify invite use case."""

from pydantic import BaseModel

from gatehouse.application.usecase.base import BaseUseCase
from gatehouse.application.usecase.profile.common import PublicProfileItem
from gatehouse.domain.service import InviteService
from gatehouse.domain.value import InviteCode, InviteInvalidReason


class VerifyInviteRequest(BaseModel):
    """Verify invite request."""

    code: str


class VerifyInviteResponse(BaseModel):
    """Verify invite response.

    ``profile`` is set when valid, ``reason`` when not.
    """

    valid: bool
    reason: InviteInvalidReason | None = None
    profile: PublicProfileItem | None = None


class VerifyInviteUseCase(BaseUseCase):
    """Use case for checking a code before showing the registration form.

    Public and read-only. An unknown code raises NotFoundError rather
    than reporting ``valid=False``, so the caller can tell a typo apart
    from a used-up or expired invite.
    """

    def __init__(self, invite_service: InviteService) -> None:
        self.invite_service = invite_service

    async def execute(self, request: VerifyInviteRequest) -> VerifyInviteResponse:
        verification = await self.invite_service.verify_invite(
            InviteCode(root=request.code)
        )
        return VerifyInviteResponse(
            valid=verification.valid,
            reason=verification.reason,
            profile=(
                PublicProfileItem.from_profile(verification.profile)
                if verification.profile
                else None
            ),
        )
