"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from eventtalk.domain.model import Comment, Event, NewComment, User
from eventtalk.domain.value import CommentId, EventId, UserId


def _uuid(value: Any) -> UUID:
    """Normalize a UUID column value (drivers may hand back strings)."""
    return UUID(value) if isinstance(value, str) else value


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(_uuid(row["id"])),
        content=row["content"],
        created_at=row["created_at"],
        author_id=UserId(_uuid(row["author_id"])),
        event_id=EventId(_uuid(row["event_id"])),
        like_count=row["like_count"],
    )


def new_comment_to_dict(comment: NewComment) -> Dict[str, Any]:
    """Convert a not yet persisted comment to a database dict.

    Args:
        comment: NewComment domain model

    Returns:
        Dict suitable for database insertion (id is left to the database)
    """
    return comment.model_dump()


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        username=row["username"],
        email=row.get("email"),
        created_at=row["created_at"],
    )


def row_to_event(row: Dict[str, Any]) -> Event:
    """Convert database row to Event domain model.

    Args:
        row: Database row as dict

    Returns:
        Event domain model
    """
    return Event(
        id=EventId(_uuid(row["id"])),
        name=row["name"],
        schedule=row.get("schedule"),
        created_at=row["created_at"],
    )
