"""Shared backing tables for the in-memory repositories."""

from gatehouse.domain.model import Invite, Profile
from gatehouse.domain.value import InviteId, ProfileId


class InMemoryStore:
    """Tables shared by in-memory repositories.

    Invite and profile repositories need each other's rows (profile names
    in invite listings, invite counts for profiles), as they would through
    joins in a real database.
    """

    def __init__(self) -> None:
        self.invites: dict[InviteId, Invite] = {}
        self.profiles: dict[ProfileId, Profile] = {}
