"""List profiles use case."""

from pydantic import BaseModel

from gatehouse.application.usecase.base import BaseUseCase
from gatehouse.application.usecase.profile.common import ProfileItem
from gatehouse.domain.service import ProfileService
from gatehouse.domain.value import Actor


class ListProfilesRequest(BaseModel):
    """List profiles request."""

    actor: Actor


class ListProfilesResponse(BaseModel):
    """Profiles ordered by name, with invite counts."""

    profiles: list[ProfileItem]


class ListProfilesUseCase(BaseUseCase):
    """Use case for listing profiles."""

    def __init__(self, profile_service: ProfileService) -> None:
        self.profile_service = profile_service

    async def execute(self, request: ListProfilesRequest) -> ListProfilesResponse:
        summaries = await self.profile_service.list_profiles(request.actor)
        return ListProfilesResponse(
            profiles=[
                ProfileItem.from_profile(s.profile, invite_count=s.invite_count)
                for s in summaries
            ]
        )
