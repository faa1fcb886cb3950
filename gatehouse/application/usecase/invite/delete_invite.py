"""Delete invite use case."""

from pydantic import BaseModel

from gatehouse.application.usecase.base import BaseUseCase, parse_uuid
from gatehouse.domain.service import InviteService
from gatehouse.domain.value import Actor, InviteId


class DeleteInviteRequest(BaseModel):
    """Delete invite request."""

    actor: Actor
    invite_id: str


class DeleteInviteResponse(BaseModel):
    """Delete invite response."""

    success: bool
    message: str


class DeleteInviteUseCase(BaseUseCase):
    """Use case for deleting an invite."""

    def __init__(self, invite_service: InviteService) -> None:
        self.invite_service = invite_service

    async def execute(self, request: DeleteInviteRequest) -> DeleteInviteResponse:
        invite_id = InviteId(parse_uuid(request.invite_id, "invite_id"))
        await self.invite_service.delete_invite(request.actor, invite_id)
        return DeleteInviteResponse(success=True, message="Invite deleted")
