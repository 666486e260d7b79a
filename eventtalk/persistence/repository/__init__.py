"""PostgreSQL repository implementations."""

from eventtalk.persistence.repository.comment import PostgresCommentRepository
from eventtalk.persistence.repository.event import PostgresEventRepository
from eventtalk.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresCommentRepository",
    "PostgresEventRepository",
    "PostgresUserRepository",
]
