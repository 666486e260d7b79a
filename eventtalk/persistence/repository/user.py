"""PostgreSQL implementation of User repository."""

from typing import Iterable

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from eventtalk.domain.model import User
from eventtalk.domain.repository import UserRepository
from eventtalk.domain.value import UserId
from eventtalk.persistence.mappers import row_to_user
from eventtalk.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_ids(self, user_ids: Iterable[UserId]) -> list[User]:
        """Find multiple users in a single query."""
        ids = list(set(user_ids))
        if not ids:
            return []

        stmt = select(users_table).where(users_table.c.id.in_(ids))
        result = await self.session.execute(stmt)
        return [row_to_user(row._asdict()) for row in result.fetchall()]
