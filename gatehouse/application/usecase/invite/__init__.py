"""Invite use cases."""

from gatehouse.application.usecase.invite.common import InviteItem
from gatehouse.application.usecase.invite.consume_invite import (
    ConsumeInviteRequest,
    ConsumeInviteResponse,
    ConsumeInviteUseCase,
)
from gatehouse.application.usecase.invite.create_invite import (
    CreateInviteRequest,
    CreateInviteResponse,
    CreateInviteUseCase,
)
from gatehouse.application.usecase.invite.delete_invite import (
    DeleteInviteRequest,
    DeleteInviteResponse,
    DeleteInviteUseCase,
)
from gatehouse.application.usecase.invite.get_invite import (
    GetInviteRequest,
    GetInviteResponse,
    GetInviteUseCase,
)
from gatehouse.application.usecase.invite.list_invites import (
    ListInvitesRequest,
    ListInvitesResponse,
    ListInvitesUseCase,
)
from gatehouse.application.usecase.invite.update_invite import (
    UpdateInviteRequest,
    UpdateInviteResponse,
    UpdateInviteUseCase,
)
from gatehouse.application.usecase.invite.verify_invite import (
    VerifyInviteRequest,
    VerifyInviteResponse,
    VerifyInviteUseCase,
)

__all__ = [
    "ConsumeInviteRequest",
    "ConsumeInviteResponse",
    "ConsumeInviteUseCase",
    "CreateInviteRequest",
    "CreateInviteResponse",
    "CreateInviteUseCase",
    "DeleteInviteRequest",
    "DeleteInviteResponse",
    "DeleteInviteUseCase",
    "GetInviteRequest",
    "GetInviteResponse",
    "GetInviteUseCase",
    "InviteItem",
    "ListInvitesRequest",
    "ListInvitesResponse",
    "ListInvitesUseCase",
    "UpdateInviteRequest",
    "UpdateInviteResponse",
    "UpdateInviteUseCase",
    "VerifyInviteRequest",
    "VerifyInviteResponse",
    "VerifyInviteUseCase",
]
