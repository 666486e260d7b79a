"""Test harness for unit and integration tests.

Integration tests assume a PostgreSQL instance is reachable with the
settings loaded from the environment (configure via .env or export).
"""

from datetime import datetime, timedelta, timezone

import pytest_asyncio

from eventtalk.util.di import Component
from tests.di import build_test_container

BASE_TIME = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def at(minutes: int) -> datetime:
    """Timestamp ``minutes`` after a fixed base time."""
    return BASE_TIME + timedelta(minutes=minutes)


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a test container with specified unmocking
    - Yields request-scoped container for service access

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - everything in memory
        unit_env = create_env_fixture()

        # Integration tests - real persistence
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_like(unit_env):
            service = await unit_env.get(CommentService)
            ...
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment
