"""Repository interfaces for the Gatehouse domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from gatehouse.domain.repository.invite import InviteRepository
from gatehouse.domain.repository.profile import ProfileRepository

__all__ = [
    "InviteRepository",
    "ProfileRepository",
]
