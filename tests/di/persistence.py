"""Mock persistence providers for testing."""

from dishka import Scope, provide

from eventtalk.domain.repository import (
    CommentRepository,
    EventRepository,
    UserRepository,
)
from eventtalk.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryEventRepository,
    InMemoryUserRepository,
)
from eventtalk.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses APP scope so that data written by one request is visible to the
    next one. Each test builds its own container, so tests stay isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_comment_repository(self) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository()

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository()

    @provide(scope=Scope.APP)
    def get_event_repository(self) -> EventRepository:
        """Provide in-memory event repository."""
        return InMemoryEventRepository()
