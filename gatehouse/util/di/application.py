"""Application layer DI providers."""

from dishka import Scope, provide

from gatehouse.application.usecase.invite import (
    ConsumeInviteUseCase,
    CreateInviteUseCase,
    DeleteInviteUseCase,
    GetInviteUseCase,
    ListInvitesUseCase,
    UpdateInviteUseCase,
    VerifyInviteUseCase,
)
from gatehouse.application.usecase.profile import (
    CreateProfileUseCase,
    DeleteProfileUseCase,
    GetDefaultProfileUseCase,
    GetProfileUseCase,
    ListProfileInvitesUseCase,
    ListProfilesUseCase,
    SetDefaultProfileUseCase,
    UpdateProfileUseCase,
)
from gatehouse.config import Settings
from gatehouse.domain.repository import InviteRepository
from gatehouse.domain.service import InviteService, ProfileService
from gatehouse.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Application use cases provider."""

    # Invite use cases
    @provide(scope=Scope.REQUEST)
    def get_create_invite_use_case(
        self, invite_service: InviteService, settings: Settings
    ) -> CreateInviteUseCase:
        """Provide create invite use case."""
        return CreateInviteUseCase(invite_service=invite_service, settings=settings)

    @provide(scope=Scope.REQUEST)
    def get_list_invites_use_case(
        self, invite_service: InviteService, settings: Settings
    ) -> ListInvitesUseCase:
        """Provide list invites use case."""
        return ListInvitesUseCase(invite_service=invite_service, settings=settings)

    @provide(scope=Scope.REQUEST)
    def get_get_invite_use_case(
        self,
        invite_service: InviteService,
        profile_service: ProfileService,
        settings: Settings,
    ) -> GetInviteUseCase:
        """Provide get invite use case."""
        return GetInviteUseCase(
            invite_service=invite_service,
            profile_service=profile_service,
            settings=settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_update_invite_use_case(
        self, invite_service: InviteService, settings: Settings
    ) -> UpdateInviteUseCase:
        """Provide update invite use case."""
        return UpdateInviteUseCase(invite_service=invite_service, settings=settings)

    @provide(scope=Scope.REQUEST)
    def get_delete_invite_use_case(
        self, invite_service: InviteService
    ) -> DeleteInviteUseCase:
        """Provide delete invite use case."""
        return DeleteInviteUseCase(invite_service=invite_service)

    @provide(scope=Scope.REQUEST)
    def get_verify_invite_use_case(
        self, invite_service: InviteService
    ) -> VerifyInviteUseCase:
        """Provide verify invite use case."""
        return VerifyInviteUseCase(invite_service=invite_service)

    @provide(scope=Scope.REQUEST)
    def get_consume_invite_use_case(
        self, invite_service: InviteService
    ) -> ConsumeInviteUseCase:
        """Provide consume invite use case."""
        return ConsumeInviteUseCase(invite_service=invite_service)

    # Profile use cases
    @provide(scope=Scope.REQUEST)
    def get_create_profile_use_case(
        self, profile_service: ProfileService
    ) -> CreateProfileUseCase:
        """Provide create profile use case."""
        return CreateProfileUseCase(profile_service=profile_service)

    @provide(scope=Scope.REQUEST)
    def get_list_profiles_use_case(
        self, profile_service: ProfileService
    ) -> ListProfilesUseCase:
        """Provide list profiles use case."""
        return ListProfilesUseCase(profile_service=profile_service)

    @provide(scope=Scope.REQUEST)
    def get_get_profile_use_case(
        self, profile_service: ProfileService, invite_repository: InviteRepository
    ) -> GetProfileUseCase:
        """Provide get profile use case."""
        return GetProfileUseCase(
            profile_service=profile_service, invite_repository=invite_repository
        )

    @provide(scope=Scope.REQUEST)
    def get_update_profile_use_case(
        self, profile_service: ProfileService
    ) -> UpdateProfileUseCase:
        """Provide update profile use case."""
        return UpdateProfileUseCase(profile_service=profile_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_profile_use_case(
        self, profile_service: ProfileService
    ) -> DeleteProfileUseCase:
        """Provide delete profile use case."""
        return DeleteProfileUseCase(profile_service=profile_service)

    @provide(scope=Scope.REQUEST)
    def get_set_default_profile_use_case(
        self, profile_service: ProfileService
    ) -> SetDefaultProfileUseCase:
        """Provide set default profile use case."""
        return SetDefaultProfileUseCase(profile_service=profile_service)

    @provide(scope=Scope.REQUEST)
    def get_get_default_profile_use_case(
        self, profile_service: ProfileService
    ) -> GetDefaultProfileUseCase:
        """Provide get default profile use case."""
        return GetDefaultProfileUseCase(profile_service=profile_service)

    @provide(scope=Scope.REQUEST)
    def get_list_profile_invites_use_case(
        self, profile_service: ProfileService, settings: Settings
    ) -> ListProfileInvitesUseCase:
        """Provide list profile invites use case."""
        return ListProfileInvitesUseCase(
            profile_service=profile_service, settings=settings
        )
