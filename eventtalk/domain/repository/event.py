"""Event repository interface."""

from abc import ABC, abstractmethod
from typing import Iterable

from eventtalk.domain.model.event import Event
from eventtalk.domain.value import EventId


class EventRepository(ABC):
    """Read access to events, used to enrich comments.

    Events are owned elsewhere; this service never writes them.
    """

    @abstractmethod
    async def find_by_ids(self, event_ids: Iterable[EventId]) -> list[Event]:
        """Find multiple events in a single query.

        Args:
            event_ids: Event identifiers (duplicates allowed)

        Returns:
            Found events (may be fewer than requested if some don't exist)
        """
        pass
