"""Mock persistence providers for testing."""

from dishka import Scope, provide

from gatehouse.domain.repository import InviteRepository, ProfileRepository
from gatehouse.persistence.repository.inmemory import (
    InMemoryInviteRepository,
    InMemoryProfileRepository,
    InMemoryStore,
)
from gatehouse.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Repositories are APP-scoped and share one store, so data written in one
    request is visible to the next within the same container. Every test
    builds its own container, which keeps tests isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_store(self) -> InMemoryStore:
        """Provide the shared in-memory tables."""
        return InMemoryStore()

    @provide(scope=Scope.APP)
    def get_invite_repository(self, store: InMemoryStore) -> InviteRepository:
        """Provide in-memory invite repository."""
        return InMemoryInviteRepository(store)

    @provide(scope=Scope.APP)
    def get_profile_repository(self, store: InMemoryStore) -> ProfileRepository:
        """Provide in-memory profile repository."""
        return InMemoryProfileRepository(store)
