"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Iterable

from eventtalk.domain.model.user import User
from eventtalk.domain.value import UserId


class UserRepository(ABC):
    """Read access to users, used to enrich comments.

    Users are owned elsewhere; this service never writes them.
    """

    @abstractmethod
    async def find_by_ids(self, user_ids: Iterable[UserId]) -> list[User]:
        """Find multiple users in a single query.

        Args:
            user_ids: User identifiers (duplicates allowed)

        Returns:
            Found users (may be fewer than requested if some don't exist)
        """
        pass
