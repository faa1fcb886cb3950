"""Get invite use case."""

from pydantic import BaseModel

from gatehouse.application.usecase.base import BaseUseCase, parse_uuid
from gatehouse.application.usecase.invite.common import InviteItem
from gatehouse.config import Settings
from gatehouse.domain.service import InviteService, ProfileService
from gatehouse.domain.value import Actor, InviteId


class GetInviteRequest(BaseModel):
    """Get invite request."""

    actor: Actor
    invite_id: str


class GetInviteResponse(BaseModel):
    """Get invite response."""

    invite: InviteItem


class GetInviteUseCase(BaseUseCase):
    """Use case for fetching a single invite."""

    def __init__(
        self,
        invite_service: InviteService,
        profile_service: ProfileService,
        settings: Settings,
    ) -> None:
        """Initialize get invite use case.

        Args:
            invite_service: Invite domain service
            profile_service: Profile domain service, for the profile name
            settings: Application settings
        """
        self.invite_service = invite_service
        self.profile_service = profile_service
        self.settings = settings

    async def execute(self, request: GetInviteRequest) -> GetInviteResponse:
        """Get the invite.

        Raises:
            ForbiddenError: If the caller is not an administrator
            NotFoundError: If the invite does not exist
        """
        invite_id = InviteId(parse_uuid(request.invite_id, "invite_id"))
        invite = await self.invite_service.get_invite(request.actor, invite_id)
        profile = await self.profile_service.find_profile(invite.profile_id)
        return GetInviteResponse(
            invite=InviteItem.from_invite(
                invite,
                self.settings.api.frontend_url,
                profile_name=profile.name.root if profile else None,
            )
        )
