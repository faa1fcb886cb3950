"""Set default profile use case."""

from pydantic import BaseModel

from gatehouse.application.usecase.base import BaseUseCase, parse_uuid
from gatehouse.domain.service import ProfileService
from gatehouse.domain.value import Actor, ProfileId


class SetDefaultProfileRequest(BaseModel):
    """Set default profile request."""

    actor: Actor
    profile_id: str


class SetDefaultProfileResponse(BaseModel):
    """Set default profile response."""

    success: bool
    message: str


class SetDefaultProfileUseCase(BaseUseCase):
    """Use case for moving the default flag to another profile."""

    def __init__(self, profile_service: ProfileService) -> None:
        self.profile_service = profile_service

    async def execute(
        self, request: SetDefaultProfileRequest
    ) -> SetDefaultProfileResponse:
        profile_id = ProfileId(parse_uuid(request.profile_id, "profile_id"))
        await self.profile_service.set_default(request.actor, profile_id)
        return SetDefaultProfileResponse(
            success=True, message="Default profile updated"
        )
