"""Create profile use case."""

import logfire
from pydantic import BaseModel, Field

from gatehouse.application.usecase.base import BaseUseCase
from gatehouse.application.usecase.profile.common import ProfileItem
from gatehouse.domain.service import ProfileService
from gatehouse.domain.value import Actor, ProfileName


class CreateProfileRequest(BaseModel):
    """Create profile request."""

    actor: Actor
    name: str
    template_user_ref: str | None = Field(default=None, max_length=255)


class CreateProfileResponse(BaseModel):
    """Create profile response."""

    profile: ProfileItem


class CreateProfileUseCase(BaseUseCase):
    """Use case for creating a profile."""

    def __init__(self, profile_service: ProfileService) -> None:
        """Initialize create profile use case.

        Args:
            profile_service: Profile domain service
        """
        self.profile_service = profile_service

    async def execute(self, request: CreateProfileRequest) -> CreateProfileResponse:
        """Create the profile.

        Raises:
            ForbiddenError: If the caller is not an administrator
            ConflictError: If the name is taken
        """
        with logfire.span("create_profile.execute", name=request.name):
            profile = await self.profile_service.create_profile(
                actor=request.actor,
                name=ProfileName(root=request.name),
                template_user_ref=request.template_user_ref,
            )
            return CreateProfileResponse(
                profile=ProfileItem.from_profile(profile, invite_count=0)
            )
