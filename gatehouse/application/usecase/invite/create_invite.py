"""Create invite use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from gatehouse.application.usecase.base import BaseUseCase, parse_uuid
from gatehouse.application.usecase.invite.common import InviteItem
from gatehouse.config import Settings
from gatehouse.domain.service import InviteService
from gatehouse.domain.value import Actor, ProfileId


class CreateInviteRequest(BaseModel):
    """Request to create an invite."""

    actor: Actor
    profile_id: str
    expires_at: datetime | None = None
    max_uses: int | None = None


class CreateInviteResponse(BaseModel):
    """Response after creating an invite."""

    invite: InviteItem


class CreateInviteUseCase(BaseUseCase):
    """Use case for creating an invite bound to a profile."""

    def __init__(self, invite_service: InviteService, settings: Settings) -> None:
        """Initialize use case.

        Args:
            invite_service: Invite domain service
            settings: Application settings, for the invite URL
        """
        self.invite_service = invite_service
        self.settings = settings

    async def execute(self, request: CreateInviteRequest) -> CreateInviteResponse:
        """Create the invite.

        Args:
            request: Create invite request

        Returns:
            Created invite with its registration link

        Raises:
            ForbiddenError: If the caller is not an administrator
            NotFoundError: If the profile does not exist
            InvalidOperationError: If max_uses is not positive
            ConflictError: If no unique code could be generated
        """
        with logfire.span("create_invite.execute", profile_id=request.profile_id):
            profile_id = ProfileId(parse_uuid(request.profile_id, "profile_id"))
            invite = await self.invite_service.create_invite(
                actor=request.actor,
                profile_id=profile_id,
                expires_at=request.expires_at,
                max_uses=request.max_uses,
            )
            return CreateInviteResponse(
                invite=InviteItem.from_invite(invite, self.settings.api.frontend_url)
            )
