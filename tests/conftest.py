"""Test configuration and fixtures."""

from datetime import datetime, timezone
from uuid import uuid4

import logfire
import pytest

from eventtalk.domain.model import Event, User
from eventtalk.domain.value import EventId, UserId

# Spans stay local while the suite runs
logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture
def user() -> User:
    """A user as stored by the platform."""
    return User(id=UserId(uuid4()), username="ana", email="ana@example.com")


@pytest.fixture
def event() -> Event:
    """An event as stored by the platform."""
    return Event(
        id=EventId(uuid4()),
        name="Concierto de primavera",
        schedule=datetime(2024, 6, 21, 20, 0, tzinfo=timezone.utc),
    )
