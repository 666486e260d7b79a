"""In-memory user repository for testing."""

from typing import Iterable

from eventtalk.domain.model.user import User
from eventtalk.domain.repository.user import UserRepository
from eventtalk.domain.value import UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_ids(self, user_ids: Iterable[UserId]) -> list[User]:
        """Find multiple users."""
        return [self._users[uid] for uid in set(user_ids) if uid in self._users]

    def add(self, user: User) -> User:
        """Seed a user; only tests write users."""
        self._users[user.id] = user
        return user
