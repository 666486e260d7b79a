"""PostgreSQL implementation of Event repository."""

from typing import Iterable

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from eventtalk.domain.model import Event
from eventtalk.domain.repository import EventRepository
from eventtalk.domain.value import EventId
from eventtalk.persistence.mappers import row_to_event
from eventtalk.persistence.tables import events_table


class PostgresEventRepository(EventRepository):
    """PostgreSQL implementation of EventRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_ids(self, event_ids: Iterable[EventId]) -> list[Event]:
        """Find multiple events in a single query."""
        ids = list(set(event_ids))
        if not ids:
            return []

        stmt = select(events_table).where(events_table.c.id.in_(ids))
        result = await self.session.execute(stmt)
        return [row_to_event(row._asdict()) for row in result.fetchall()]
