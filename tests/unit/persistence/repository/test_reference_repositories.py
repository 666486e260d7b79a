"""Unit tests for the user and event repositories used for enrichment."""

from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest
from sqlalchemy.dialects import postgresql

from eventtalk.domain.repository import EventRepository, UserRepository
from eventtalk.persistence.repository import (
    PostgresEventRepository,
    PostgresUserRepository,
)


def _session_with_rows(rows):
    result = MagicMock()
    result.fetchall.return_value = rows
    session = MagicMock()
    session.execute = AsyncMock(return_value=result)
    session.commit = AsyncMock()
    session.flush = AsyncMock()
    return session


def _row(values):
    row = MagicMock()
    row._asdict.return_value = values
    return row


class TestReferenceRepositoriesAreReadOnly:
    """Users and events are only read here."""

    @pytest.mark.parametrize("repo_class", [UserRepository, EventRepository])
    def test_interface_only_batch_reads(self, repo_class):
        """The only operation is a batched lookup."""
        assert repo_class.__abstractmethods__ == frozenset({"find_by_ids"})

    @pytest.mark.parametrize(
        "repo_class", [PostgresUserRepository, PostgresEventRepository]
    )
    def test_postgres_repositories_have_no_writes(self, repo_class):
        """Nothing can write users or events through the service."""
        assert not hasattr(repo_class, "save")


class TestPostgresUserRepository:
    """Batched user lookup."""

    @pytest.mark.asyncio
    async def test_find_by_ids_issues_one_in_query(self):
        """Duplicate ids collapse into a single IN query."""
        # Arrange
        user_id = uuid4()
        session = _session_with_rows(
            [
                _row(
                    {
                        "id": str(user_id),
                        "username": "ana",
                        "email": None,
                        "created_at": datetime(2024, 5, 1, tzinfo=timezone.utc),
                    }
                )
            ]
        )
        repo = PostgresUserRepository(session)

        # Act
        users = await repo.find_by_ids([user_id, user_id])

        # Assert
        assert [u.id for u in users] == [user_id]
        session.execute.assert_awaited_once()
        stmt = session.execute.await_args.args[0]
        sql = str(stmt.compile(dialect=postgresql.dialect()))
        assert "users.id IN" in sql
        session.commit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_find_by_ids_with_no_ids_skips_query(self):
        """An empty batch never touches the database."""
        # Arrange
        session = _session_with_rows([])
        repo = PostgresEventRepository(session)

        # Act
        events = await repo.find_by_ids([])

        # Assert
        assert events == []
        session.execute.assert_not_awaited()
