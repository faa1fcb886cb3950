"""List profile invites use case."""

from pydantic import BaseModel

from gatehouse.application.usecase.base import BaseUseCase, parse_uuid
from gatehouse.application.usecase.invite.common import InviteItem
from gatehouse.config import Settings
from gatehouse.domain.service import ProfileService
from gatehouse.domain.value import Actor, ProfileId


class ListProfileInvitesRequest(BaseModel):
    """List profile invites request."""

    actor: Actor
    profile_id: str


class ListProfileInvitesResponse(BaseModel):
    """Invites granting the profile, newest first."""

    invites: list[InviteItem]
    total: int


class ListProfileInvitesUseCase(BaseUseCase):
    """Use case for listing the invites that block a profile's deletion."""

    def __init__(self, profile_service: ProfileService, settings: Settings) -> None:
        """Initialize list profile invites use case.

        Args:
            profile_service: Profile domain service
            settings: Application settings, for invite URLs
        """
        self.profile_service = profile_service
        self.settings = settings

    async def execute(
        self, request: ListProfileInvitesRequest
    ) -> ListProfileInvitesResponse:
        """List the invites.

        Raises:
            ForbiddenError: If the caller is not an administrator
            NotFoundError: If the profile does not exist
        """
        profile_id = ProfileId(parse_uuid(request.profile_id, "profile_id"))
        profile = await self.profile_service.get_profile(request.actor, profile_id)
        invites = await self.profile_service.list_invites(request.actor, profile_id)
        frontend_url = self.settings.api.frontend_url
        items = [
            InviteItem.from_invite(invite, frontend_url, profile_name=profile.name.root)
            for invite in invites
        ]
        return ListProfileInvitesResponse(invites=items, total=len(items))
