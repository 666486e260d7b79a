"""Domain value objects for Event Talk."""

from eventtalk.domain.value.identifiers import (
    CommentId,
    EventId,
    UserId,
    parse_identifier,
)
from eventtalk.domain.value.types import (
    DEFAULT_PAGE,
    DEFAULT_PAGE_SIZE,
    CommentQuery,
    PageRequest,
)

__all__ = [
    # Identifiers
    "CommentId",
    "EventId",
    "UserId",
    "parse_identifier",
    # Types
    "DEFAULT_PAGE",
    "DEFAULT_PAGE_SIZE",
    "CommentQuery",
    "PageRequest",
]
