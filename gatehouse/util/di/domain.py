"""Domain layer DI providers."""

from dishka import Scope, provide

from gatehouse.config import AuthSettings, InvitationSettings
from gatehouse.domain.repository import InviteRepository, ProfileRepository
from gatehouse.domain.service import (
    CodeGenerator,
    InviteService,
    JWTService,
    ProfileService,
)
from gatehouse.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Domain services provider.

    Services are REQUEST-scoped to share the request's repositories and
    therefore its transaction.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_code_generator(self, settings: InvitationSettings) -> CodeGenerator:
        """Provide invite code generator."""
        return CodeGenerator(num_bytes=settings.code_bytes)

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_profile_service(
        self,
        profile_repository: ProfileRepository,
        invite_repository: InviteRepository,
    ) -> ProfileService:
        """Provide profile domain service."""
        return ProfileService(
            profile_repository=profile_repository,
            invite_repository=invite_repository,
        )

    @provide
    def get_invite_service(
        self,
        invite_repository: InviteRepository,
        profile_service: ProfileService,
        code_generator: CodeGenerator,
        settings: InvitationSettings,
    ) -> InviteService:
        """Provide invite domain service."""
        return InviteService(
            invite_repository=invite_repository,
            profile_service=profile_service,
            code_generator=code_generator,
            max_code_attempts=settings.max_code_attempts,
        )
