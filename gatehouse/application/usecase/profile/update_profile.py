"""Update profile use case."""

import logfire
from pydantic import BaseModel

from gatehouse.application.usecase.base import BaseUseCase, parse_uuid
from gatehouse.application.usecase.profile.common import ProfileItem
from gatehouse.domain.service import ProfileService
from gatehouse.domain.value import Actor, ProfileId, ProfilePatch


class UpdateProfileRequest(BaseModel):
    """Update profile request."""

    actor: Actor
    profile_id: str
    patch: ProfilePatch


class UpdateProfileResponse(BaseModel):
    """Update profile response."""

    profile: ProfileItem


class UpdateProfileUseCase(BaseUseCase):
    """Use case for renaming a profile or changing its template."""

    def __init__(self, profile_service: ProfileService) -> None:
        self.profile_service = profile_service

    async def execute(self, request: UpdateProfileRequest) -> UpdateProfileResponse:
        """Apply the partial update.

        Raises:
            ForbiddenError: If the caller is not an administrator
            NotFoundError: If the profile does not exist
            ConflictError: If the new name is taken
        """
        with logfire.span("update_profile.execute", profile_id=request.profile_id):
            profile_id = ProfileId(parse_uuid(request.profile_id, "profile_id"))
            profile = await self.profile_service.update_profile(
                request.actor, profile_id, request.patch
            )
            return UpdateProfileResponse(profile=ProfileItem.from_profile(profile))
