"""In-memory event repository for testing."""

from typing import Iterable

from eventtalk.domain.model.event import Event
from eventtalk.domain.repository.event import EventRepository
from eventtalk.domain.value import EventId


class InMemoryEventRepository(EventRepository):
    """In-memory implementation of EventRepository for testing."""

    def __init__(self) -> None:
        self._events: dict[EventId, Event] = {}

    async def find_by_ids(self, event_ids: Iterable[EventId]) -> list[Event]:
        """Find multiple events."""
        return [self._events[eid] for eid in set(event_ids) if eid in self._events]

    def add(self, event: Event) -> Event:
        """Seed a event; only tests write events."""
        self._events[event.id] = event
        return event
