"""Domain model entities for Event Talk."""

from eventtalk.domain.model.comment import (
    Comment,
    CommentPage,
    CommentPatch,
    CommentView,
    NewComment,
)
from eventtalk.domain.model.event import Event, EventSummary
from eventtalk.domain.model.user import AuthorSummary, User

__all__ = [
    "AuthorSummary",
    "Comment",
    "CommentPage",
    "CommentPatch",
    "CommentView",
    "Event",
    "EventSummary",
    "NewComment",
    "User",
]
