"""Event entity.

Events are the things people comment on. Like users, they are managed
elsewhere and only read here.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from eventtalk.domain.model.common import DomainModel
from eventtalk.domain.value import EventId


class Event(DomainModel):
    """A scheduled event."""

    id: EventId
    name: str = Field(min_length=1, max_length=200)
    schedule: Optional[datetime] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def summary(self) -> "EventSummary":
        """Restricted projection attached to comments."""
        return EventSummary(id=self.id, name=self.name, schedule=self.schedule)


class EventSummary(DomainModel):
    """The part of an event that is embedded in comment results."""

    id: EventId
    name: str
    schedule: Optional[datetime] = None
