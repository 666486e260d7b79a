"""Strongly typed identifiers for Event Talk domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import Callable, NewType, TypeVar
from uuid import UUID

from eventtalk.domain.error import InvalidIdentifierError

# Core domain entity identifiers
CommentId = NewType("CommentId", UUID)
UserId = NewType("UserId", UUID)
EventId = NewType("EventId", UUID)

IdT = TypeVar("IdT")


def parse_identifier(raw: object, factory: Callable[[UUID], IdT], kind: str) -> IdT:
    """Parse a raw identifier into a typed id.

    Accepts UUID instances and their canonical string forms (hyphenated or
    32 hex digits).

    Args:
        raw: Value received from the caller
        factory: NewType constructor, e.g. ``CommentId``
        kind: Human readable name used in the error message

    Returns:
        The typed identifier

    Raises:
        InvalidIdentifierError: If the value is not a well-formed UUID
    """
    if isinstance(raw, UUID):
        return factory(raw)
    if not isinstance(raw, str):
        raise InvalidIdentifierError(kind, raw)
    try:
        return factory(UUID(raw.strip()))
    except ValueError:
        raise InvalidIdentifierError(kind, raw) from None
