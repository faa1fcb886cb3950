"""List invites use case."""

from pydantic import BaseModel

from gatehouse.application.usecase.base import BaseUseCase
from gatehouse.application.usecase.invite.common import InviteItem
from gatehouse.config import Settings
from gatehouse.domain.service import InviteService
from gatehouse.domain.value import Actor


class ListInvitesRequest(BaseModel):
    """List invites request."""

    actor: Actor


class ListInvitesResponse(BaseModel):
    """All invites, newest first."""

    invites: list[InviteItem]
    total: int


class ListInvitesUseCase(BaseUseCase):
    """Use case for listing every invite with its profile name."""

    def __init__(self, invite_service: InviteService, settings: Settings) -> None:
        self.invite_service = invite_service
        self.settings = settings

    async def execute(self, request: ListInvitesRequest) -> ListInvitesResponse:
        summaries = await self.invite_service.list_invites(request.actor)
        frontend_url = self.settings.api.frontend_url
        items = [
            InviteItem.from_invite(
                summary.invite, frontend_url, profile_name=summary.profile_name
            )
            for summary in summaries
        ]
        return ListInvitesResponse(invites=items, total=len(items))
