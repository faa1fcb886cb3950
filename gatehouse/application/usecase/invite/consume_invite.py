"""Consume invite use case."""

import logfire
from pydantic import BaseModel

from gatehouse.application.usecase.base import BaseUseCase
from gatehouse.application.usecase.profile.common import ProfileItem
from gatehouse.domain.service import InviteService
from gatehouse.domain.value import InviteCode


class ConsumeInviteRequest(BaseModel):
    """Consume invite request."""

    code: str


class ConsumeInviteResponse(BaseModel):
    """Consume invite response."""

    success: bool
    invite_id: str
    usage_count: int
    max_uses: int | None
    remaining_uses: int | None
    profile: ProfileItem  # Profile the new account should be provisioned with


class ConsumeInviteUseCase(BaseUseCase):
    """Use case for redeeming one use of an invite code.

    Called by the registration flow exactly once, after the external
    account was created.
    """

    def __init__(self, invite_service: InviteService) -> None:
        """Initialize consume invite use case.

        Args:
            invite_service: Invite domain service
        """
        self.invite_service = invite_service

    async def execute(self, request: ConsumeInviteRequest) -> ConsumeInviteResponse:
        """Redeem the code.

        Raises:
            NotFoundError: If the code does not exist
            InvalidOperationError: If the invite has expired
            ExhaustedError: If the usage limit was reached
        """
        code = InviteCode(root=request.code)
        with logfire.span("consume_invite.execute", code=code.masked()):
            redemption = await self.invite_service.consume_invite(code)
            invite = redemption.invite
            return ConsumeInviteResponse(
                success=redemption.success,
                invite_id=str(invite.id),
                usage_count=invite.usage_count,
                max_uses=invite.max_uses,
                remaining_uses=invite.remaining_uses,
                profile=ProfileItem.from_profile(redemption.profile),
            )
