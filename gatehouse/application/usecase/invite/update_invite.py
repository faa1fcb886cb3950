"""Update invite use case."""

import logfire
from pydantic import BaseModel

from gatehouse.application.usecase.base import BaseUseCase, parse_uuid
from gatehouse.application.usecase.invite.common import InviteItem
from gatehouse.config import Settings
from gatehouse.domain.service import InviteService
from gatehouse.domain.value import Actor, InviteId, InvitePatch


class UpdateInviteRequest(BaseModel):
    """Update invite request.

    ``patch`` keeps track of which fields the caller actually sent.
    """

    actor: Actor
    invite_id: str
    patch: InvitePatch


class UpdateInviteResponse(BaseModel):
    """Update invite response."""

    invite: InviteItem


class UpdateInviteUseCase(BaseUseCase):
    """Use case for changing an invite's expiry and usage limit."""

    def __init__(self, invite_service: InviteService, settings: Settings) -> None:
        self.invite_service = invite_service
        self.settings = settings

    async def execute(self, request: UpdateInviteRequest) -> UpdateInviteResponse:
        """Apply the partial update.

        Raises:
            ForbiddenError: If the caller is not an administrator
            NotFoundError: If the invite does not exist
            InvalidOperationError: If the new limit is invalid or below usage
        """
        with logfire.span("update_invite.execute", invite_id=request.invite_id):
            invite_id = InviteId(parse_uuid(request.invite_id, "invite_id"))
            invite = await self.invite_service.update_invite(
                request.actor, invite_id, request.patch
            )
            return UpdateInviteResponse(
                invite=InviteItem.from_invite(invite, self.settings.api.frontend_url)
            )
