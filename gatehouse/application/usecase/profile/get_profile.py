"""Get profile use case."""

from pydantic import BaseModel

from gatehouse.application.usecase.base import BaseUseCase, parse_uuid
from gatehouse.application.usecase.profile.common import ProfileItem
from gatehouse.domain.repository import InviteRepository
from gatehouse.domain.service import ProfileService
from gatehouse.domain.value import Actor, ProfileId


class GetProfileRequest(BaseModel):
    """Get profile request."""

    actor: Actor
    profile_id: str


class GetProfileResponse(BaseModel):
    """Get profile response."""

    profile: ProfileItem


class GetProfileUseCase(BaseUseCase):
    """Use case for fetching a profile with its invite count."""

    def __init__(
        self, profile_service: ProfileService, invite_repository: InviteRepository
    ) -> None:
        """Initialize get profile use case.

        Args:
            profile_service: Profile domain service
            invite_repository: Invite repository, for the invite count
        """
        self.profile_service = profile_service
        self.invite_repository = invite_repository

    async def execute(self, request: GetProfileRequest) -> GetProfileResponse:
        """Get the profile.

        Raises:
            ForbiddenError: If the caller is not an administrator
            NotFoundError: If the profile does not exist
        """
        profile_id = ProfileId(parse_uuid(request.profile_id, "profile_id"))
        profile = await self.profile_service.get_profile(request.actor, profile_id)
        invite_count = await self.invite_repository.count_by_profile(profile_id)
        return GetProfileResponse(
            profile=ProfileItem.from_profile(profile, invite_count=invite_count)
        )
