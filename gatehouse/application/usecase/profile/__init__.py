"""Profile use cases."""

from gatehouse.application.usecase.profile.common import (
    ProfileItem,
    PublicProfileItem,
)
from gatehouse.application.usecase.profile.create_profile import (
    CreateProfileRequest,
    CreateProfileResponse,
    CreateProfileUseCase,
)
from gatehouse.application.usecase.profile.delete_profile import (
    DeleteProfileRequest,
    DeleteProfileResponse,
    DeleteProfileUseCase,
)
from gatehouse.application.usecase.profile.get_default_profile import (
    GetDefaultProfileRequest,
    GetDefaultProfileResponse,
    GetDefaultProfileUseCase,
)
from gatehouse.application.usecase.profile.get_profile import (
    GetProfileRequest,
    GetProfileResponse,
    GetProfileUseCase,
)
from gatehouse.application.usecase.profile.list_profile_invites import (
    ListProfileInvitesRequest,
    ListProfileInvitesResponse,
    ListProfileInvitesUseCase,
)
from gatehouse.application.usecase.profile.list_profiles import (
    ListProfilesRequest,
    ListProfilesResponse,
    ListProfilesUseCase,
)
from gatehouse.application.usecase.profile.set_default_profile import (
    SetDefaultProfileRequest,
    SetDefaultProfileResponse,
    SetDefaultProfileUseCase,
)
from gatehouse.application.usecase.profile.update_profile import (
    UpdateProfileRequest,
    UpdateProfileResponse,
    UpdateProfileUseCase,
)

__all__ = [
    "CreateProfileRequest",
    "CreateProfileResponse",
    "CreateProfileUseCase",
    "DeleteProfileRequest",
    "DeleteProfileResponse",
    "DeleteProfileUseCase",
    "GetDefaultProfileRequest",
    "GetDefaultProfileResponse",
    "GetDefaultProfileUseCase",
    "GetProfileRequest",
    "GetProfileResponse",
    "GetProfileUseCase",
    "ListProfileInvitesRequest",
    "ListProfileInvitesResponse",
    "ListProfileInvitesUseCase",
    "ListProfilesRequest",
    "ListProfilesResponse",
    "ListProfilesUseCase",
    "ProfileItem",
    "PublicProfileItem",
    "SetDefaultProfileRequest",
    "SetDefaultProfileResponse",
    "SetDefaultProfileUseCase",
    "UpdateProfileRequest",
    "UpdateProfileResponse",
    "UpdateProfileUseCase",
]
