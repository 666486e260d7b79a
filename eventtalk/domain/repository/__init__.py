"""Repository interfaces for Event Talk domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from eventtalk.domain.repository.comment import CommentRepository
from eventtalk.domain.repository.event import EventRepository
from eventtalk.domain.repository.user import UserRepository

__all__ = [
    "CommentRepository",
    "EventRepository",
    "UserRepository",
]
