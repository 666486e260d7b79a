"""Comment domain service."""

from datetime import datetime
from typing import Any, Mapping, TypeVar

import logfire
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from eventtalk.domain.error import ValidationError
from eventtalk.domain.model import (
    Comment,
    CommentPage,
    CommentPatch,
    CommentView,
    NewComment,
)
from eventtalk.domain.repository import (
    CommentRepository,
    EventRepository,
    UserRepository,
)
from eventtalk.domain.value import (
    CommentId,
    CommentQuery,
    EventId,
    PageRequest,
    UserId,
    parse_identifier,
)

from .base import Service

ModelT = TypeVar("ModelT", bound=BaseModel)

PATCHABLE_FIELDS = ("content", "like_count")


def _build(model: type[ModelT], **fields: Any) -> ModelT:
    """Instantiate a domain model, turning pydantic errors into domain ones."""
    try:
        return model(**fields)
    except PydanticValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in e.errors()
        )
        raise ValidationError(problems) from None


class CommentService(Service):
    """Domain service for comment operations.

    Owns identifier validation, pagination, filtering and the enrichment of
    comments with author and event summaries.
    """

    def __init__(
        self,
        comment_repository: CommentRepository,
        user_repository: UserRepository,
        event_repository: EventRepository,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            user_repository: User repository (read for enrichment)
            event_repository: Event repository (read for enrichment)
        """
        self.comment_repository = comment_repository
        self.user_repository = user_repository
        self.event_repository = event_repository

    async def create_comment(
        self,
        content: str | None,
        author_id: str | UserId | None,
        event_id: str | EventId | None,
        like_count: int | None = None,
        created_at: datetime | None = None,
    ) -> Comment:
        """Create a comment on an event.

        Args:
            content: Comment text (1-500 characters)
            author_id: Author user ID
            event_id: Event ID
            like_count: Initial like count (defaults to 0)
            created_at: Creation time (defaults to now)

        Returns:
            Created comment with its backend-assigned id

        Raises:
            ValidationError: If a required field is missing or out of range
            InvalidIdentifierError: If author_id or event_id is malformed
        """
        required = {"content": content, "author_id": author_id, "event_id": event_id}
        missing = [name for name, value in required.items() if value is None or value == ""]
        if missing:
            raise ValidationError(f"Missing required fields: {', '.join(missing)}")

        fields: dict[str, Any] = {
            "content": content,
            "author_id": parse_identifier(author_id, UserId, "author"),
            "event_id": parse_identifier(event_id, EventId, "event"),
        }
        if like_count is not None:
            fields["like_count"] = like_count
        if created_at is not None:
            fields["created_at"] = created_at
        new_comment = _build(NewComment, **fields)

        with logfire.span(
            "comment_service.create_comment",
            author_id=str(new_comment.author_id),
            event_id=str(new_comment.event_id),
        ):
            saved = await self.comment_repository.create(new_comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                event_id=str(saved.event_id),
                content_length=len(saved.content),
            )
            return saved

    async def get_comment(self, comment_id: str | CommentId) -> CommentView | None:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Enriched comment if found, None otherwise

        Raises:
            InvalidIdentifierError: If the id is malformed
        """
        cid = parse_identifier(comment_id, CommentId, "comment")
        with logfire.span("comment_service.get_comment", comment_id=str(cid)):
            comment = await self.comment_repository.find_by_id(cid)
            if comment is None:
                logfire.warn("Comment not found", comment_id=str(cid))
                return None
            return await self._enrich_one(comment)

    async def list_comments(
        self, page: Any = None, page_size: Any = None
    ) -> CommentPage:
        """List all comments, newest first.

        Args:
            page: 1-based page number (lenient, defaults to 1)
            page_size: Comments per page (lenient, defaults to 10)

        Returns:
            Page envelope
        """
        request = PageRequest.from_raw(page, page_size)
        with logfire.span(
            "comment_service.list_comments",
            page=request.page,
            page_size=request.page_size,
        ):
            return await self._paginate(CommentQuery(), request)

    async def list_comments_for_event(
        self, event_id: str | EventId, page: Any = None, page_size: Any = None
    ) -> CommentPage:
        """List the comments of one event, newest first.

        The event itself is not looked up: an unknown but well-formed id
        yields an empty page.

        Args:
            event_id: Event ID
            page: 1-based page number (lenient, defaults to 1)
            page_size: Comments per page (lenient, defaults to 10)

        Returns:
            Page envelope

        Raises:
            InvalidIdentifierError: If the event id is malformed
        """
        eid = parse_identifier(event_id, EventId, "event")
        request = PageRequest.from_raw(page, page_size)
        with logfire.span(
            "comment_service.list_comments_for_event",
            event_id=str(eid),
            page=request.page,
            page_size=request.page_size,
        ):
            return await self._paginate(CommentQuery(event_id=eid), request)

    async def search_comments(
        self, query_text: str | None, page: Any = None, page_size: Any = None
    ) -> CommentPage:
        """Find comments whose content contains the given text.

        Matching is a case-insensitive literal substring test; there is no
        tokenization or ranking.

        Args:
            query_text: Text to look for
            page: 1-based page number (lenient, defaults to 1)
            page_size: Comments per page (lenient, defaults to 10)

        Returns:
            Page envelope

        Raises:
            ValidationError: If query_text is empty
        """
        if not query_text:
            raise ValidationError("Search text is required")

        request = PageRequest.from_raw(page, page_size)
        with logfire.span(
            "comment_service.search_comments",
            query_length=len(query_text),
            page=request.page,
            page_size=request.page_size,
        ):
            return await self._paginate(
                CommentQuery(content_contains=query_text), request
            )

    async def update_comment(
        self,
        comment_id: str | CommentId,
        patch: CommentPatch | Mapping[str, Any],
    ) -> CommentView | None:
        """Update the mutable fields of a comment.

        Only ``content`` and ``like_count`` are written. Other keys in a
        mapping patch are ignored.

        Args:
            comment_id: Comment ID
            patch: New values

        Returns:
            Updated, enriched comment, or None if it doesn't exist

        Raises:
            InvalidIdentifierError: If the id is malformed
            ValidationError: If a new value breaks the comment constraints
        """
        cid = parse_identifier(comment_id, CommentId, "comment")
        if not isinstance(patch, CommentPatch):
            patch = _build(
                CommentPatch,
                **{key: patch[key] for key in PATCHABLE_FIELDS if key in patch},
            )

        changes = patch.changes()
        with logfire.span(
            "comment_service.update_comment",
            comment_id=str(cid),
            fields=sorted(changes),
        ):
            updated = await self.comment_repository.update(cid, patch)
            if updated is None:
                logfire.warn("Comment not found for update", comment_id=str(cid))
                return None

            logfire.info(
                "Comment updated",
                comment_id=str(cid),
                fields=sorted(changes),
            )
            return await self._enrich_one(updated)

    async def like_comment(self, comment_id: str | CommentId) -> CommentView | None:
        """Add one like to a comment.

        Uses a backend-level increment so concurrent likes are all kept.

        Args:
            comment_id: Comment ID

        Returns:
            Updated, enriched comment, or None if it doesn't exist

        Raises:
            InvalidIdentifierError: If the id is malformed
        """
        cid = parse_identifier(comment_id, CommentId, "comment")
        with logfire.span("comment_service.like_comment", comment_id=str(cid)):
            liked = await self.comment_repository.increment_like_count(cid)
            if liked is None:
                logfire.warn("Comment not found for like", comment_id=str(cid))
                return None

            logfire.info(
                "Comment liked", comment_id=str(cid), like_count=liked.like_count
            )
            return await self._enrich_one(liked)

    async def delete_comment(self, comment_id: str | CommentId) -> Comment | None:
        """Permanently delete a comment.

        Args:
            comment_id: Comment ID

        Returns:
            The comment as it was before deletion (not enriched), or None

        Raises:
            InvalidIdentifierError: If the id is malformed
        """
        cid = parse_identifier(comment_id, CommentId, "comment")
        with logfire.span("comment_service.delete_comment", comment_id=str(cid)):
            deleted = await self.comment_repository.delete(cid)
            if deleted is None:
                logfire.warn("Comment not found for delete", comment_id=str(cid))
                return None

            logfire.info("Comment deleted", comment_id=str(cid))
            return deleted

    async def _paginate(self, query: CommentQuery, request: PageRequest) -> CommentPage:
        """Count, fetch and enrich one page of a comment scan."""
        total = await self.comment_repository.count(query)

        comments: list[Comment] = []
        if request.offset < total:
            comments = await self.comment_repository.find_page(
                query, limit=request.page_size, offset=request.offset
            )

        records = await self._enrich(comments)
        logfire.info(
            "Comment page retrieved",
            total=total,
            page=request.page,
            count=len(records),
        )
        return CommentPage(
            records=records,
            total=total,
            page=request.page,
            total_pages=request.total_pages(total),
        )

    async def _enrich_one(self, comment: Comment) -> CommentView:
        (view,) = await self._enrich([comment])
        return view

    async def _enrich(self, comments: list[Comment]) -> list[CommentView]:
        """Attach author and event summaries to a batch of comments.

        Issues one user lookup and one event lookup for the whole batch.
        """
        if not comments:
            return []

        users = await self.user_repository.find_by_ids(
            {comment.author_id for comment in comments}
        )
        events = await self.event_repository.find_by_ids(
            {comment.event_id for comment in comments}
        )
        authors = {user.id: user.summary() for user in users}
        event_summaries = {event.id: event.summary() for event in events}

        return [
            CommentView(
                **comment.model_dump(),
                author=authors.get(comment.author_id),
                event=event_summaries.get(comment.event_id),
            )
            for comment in comments
        ]
