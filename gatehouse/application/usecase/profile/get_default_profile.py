"""Get default profile use case."""

from pydantic import BaseModel

from gatehouse.application.usecase.base import BaseUseCase
from gatehouse.application.usecase.profile.common import PublicProfileItem
from gatehouse.domain.service import ProfileService


class GetDefaultProfileRequest(BaseModel):
    """Get default profile request."""


class GetDefaultProfileResponse(BaseModel):
    """Default profile, or None while no profile exists."""

    profile: PublicProfileItem | None


class GetDefaultProfileUseCase(BaseUseCase):
    """Use case for looking up the default profile.

    Used by the registration flow, so it needs no administrator.
    """

    def __init__(self, profile_service: ProfileService) -> None:
        self.profile_service = profile_service

    async def execute(
        self, request: GetDefaultProfileRequest
    ) -> GetDefaultProfileResponse:
        profile = await self.profile_service.get_default_profile()
        return GetDefaultProfileResponse(
            profile=PublicProfileItem.from_profile(profile) if profile else None
        )
