"""Comment entity.

Comments are short texts attached to an event and written by a user.
They are flat (no threading) and carry a like counter.
"""

from datetime import datetime, timezone
from typing import Annotated, Optional

from pydantic import AfterValidator, Field

from eventtalk.domain.model.common import DomainModel
from eventtalk.domain.model.event import EventSummary
from eventtalk.domain.model.user import AuthorSummary
from eventtalk.domain.value import CommentId, EventId, UserId

CONTENT_MIN_LENGTH = 1
CONTENT_MAX_LENGTH = 500


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _as_utc(value: datetime) -> datetime:
    # Naive timestamps are taken to be UTC so all comments sort together
    return value if value.tzinfo else value.replace(tzinfo=timezone.utc)


UtcDatetime = Annotated[datetime, AfterValidator(_as_utc)]


class Comment(DomainModel):
    """Comment entity.

    ``created_at``, ``author_id`` and ``event_id`` never change once the
    comment exists. Only ``content`` and ``like_count`` are mutable.
    """

    id: CommentId
    content: str = Field(min_length=CONTENT_MIN_LENGTH, max_length=CONTENT_MAX_LENGTH)
    created_at: UtcDatetime = Field(default_factory=_now)
    author_id: UserId
    event_id: EventId
    like_count: int = Field(default=0, ge=0)


class NewComment(DomainModel):
    """A comment that has not been persisted yet.

    The identifier is assigned by the persistence backend on insert.
    """

    content: str = Field(min_length=CONTENT_MIN_LENGTH, max_length=CONTENT_MAX_LENGTH)
    created_at: UtcDatetime = Field(default_factory=_now)
    author_id: UserId
    event_id: EventId
    like_count: int = Field(default=0, ge=0)


class CommentPatch(DomainModel):
    """Partial update of a comment.

    Only the mutable fields exist here; anything else a caller sends is
    dropped when the patch is built.
    """

    content: Optional[str] = Field(
        default=None, min_length=CONTENT_MIN_LENGTH, max_length=CONTENT_MAX_LENGTH
    )
    like_count: Optional[int] = Field(default=None, ge=0)

    def changes(self) -> dict[str, object]:
        """Fields that were actually provided."""
        return self.model_dump(exclude_none=True)


class CommentView(Comment):
    """Comment enriched with its author and event summaries.

    ``author`` / ``event`` are None when the referenced record does not
    exist; references are not checked on write.
    """

    author: Optional[AuthorSummary] = None
    event: Optional[EventSummary] = None


class CommentPage(DomainModel):
    """One page of a sorted comment scan."""

    records: list[CommentView]
    total: int = Field(ge=0)
    page: int = Field(ge=1)
    total_pages: int = Field(ge=0)
