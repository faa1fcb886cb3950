"""Delete profile use case."""

from pydantic import BaseModel

from gatehouse.application.usecase.base import BaseUseCase, parse_uuid
from gatehouse.domain.service import ProfileService
from gatehouse.domain.value import Actor, ProfileId


class DeleteProfileRequest(BaseModel):
    """Delete profile request."""

    actor: Actor
    profile_id: str


class DeleteProfileResponse(BaseModel):
    """Delete profile response."""

    success: bool
    message: str


class DeleteProfileUseCase(BaseUseCase):
    """Use case for deleting an unused, non-default profile."""

    def __init__(self, profile_service: ProfileService) -> None:
        self.profile_service = profile_service

    async def execute(self, request: DeleteProfileRequest) -> DeleteProfileResponse:
        """Delete the profile.

        Raises:
            ForbiddenError: If the caller is not an administrator
            NotFoundError: If the profile does not exist
            InvalidOperationError: If the profile is the default or in use
        """
        profile_id = ProfileId(parse_uuid(request.profile_id, "profile_id"))
        await self.profile_service.delete_profile(request.actor, profile_id)
        return DeleteProfileResponse(success=True, message="Profile deleted")
