"""In-memory repository implementations for testing."""

from .invite import InMemoryInviteRepository
from .profile import InMemoryProfileRepository
from .store import InMemoryStore

__all__ = [
    "InMemoryInviteRepository",
    "InMemoryProfileRepository",
    "InMemoryStore",
]
