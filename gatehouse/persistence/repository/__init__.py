"""PostgreSQL repository implementations."""

from gatehouse.persistence.repository.invite import PostgresInviteRepository
from gatehouse.persistence.repository.profile import PostgresProfileRepository

__all__ = [
    "PostgresInviteRepository",
    "PostgresProfileRepository",
]
