"""Comment routes."""

from datetime import datetime
from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from eventtalk.domain.model import Comment, CommentPage
from eventtalk.domain.service import CommentService

router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)

COMMENT_NOT_FOUND = "Comment not found"


class APIModel(BaseModel):
    """Base for request/response bodies: camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AuthorResponse(APIModel):
    """Author summary embedded in a comment."""

    id: UUID
    username: str
    email: str | None = None


class EventResponse(APIModel):
    """Event summary embedded in a comment."""

    id: UUID
    name: str
    schedule: datetime | None = None


class CommentResponse(APIModel):
    """A comment, with author/event summaries when they were looked up.

    Create and delete return the stored record only, so those routes leave
    ``author`` and ``event`` out instead of sending null.
    """

    id: UUID
    content: str
    created_at: datetime
    author_id: UUID
    event_id: UUID
    like_count: int
    author: AuthorResponse | None = None
    event: EventResponse | None = None

    @classmethod
    def from_domain(cls, comment: Comment) -> "CommentResponse":
        """Build the response from a plain or enriched comment."""
        return cls.model_validate(comment.model_dump())


class CommentPageResponse(APIModel):
    """Paginated envelope: ``{records, total, page, totalPages}``."""

    records: list[CommentResponse]
    total: int
    page: int
    total_pages: int

    @classmethod
    def from_domain(cls, page: CommentPage) -> "CommentPageResponse":
        """Build the envelope from a domain page."""
        return cls.model_validate(page.model_dump())


class CreateCommentAPIRequest(APIModel):
    """API request for creating a comment.

    Required fields are checked by the comment service so that a missing
    field is reported as a domain validation error.
    """

    content: str | None = None
    author_id: str | None = None
    event_id: str | None = None
    like_count: int | None = None
    created_at: datetime | None = None


class UpdateCommentAPIRequest(APIModel):
    """API request for updating a comment.

    Only content and like count can change; other fields are ignored.
    """

    content: str | None = None
    like_count: int | None = None


def _found(comment: Comment | None, comment_id: str) -> Comment:
    if comment is None:
        logfire.info("Comment lookup missed", comment_id=comment_id)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=COMMENT_NOT_FOUND,
        )
    return comment


@router.post(
    "",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
    response_model_exclude_none=True,
)
async def create_comment(
    request: CreateCommentAPIRequest,
    comment_service: FromDishka[CommentService],
) -> CommentResponse:
    """Create a comment on an event.

    Args:
        request: Comment creation data
        comment_service: Comment service from DI

    Returns:
        Created comment
    """
    comment = await comment_service.create_comment(
        content=request.content,
        author_id=request.author_id,
        event_id=request.event_id,
        like_count=request.like_count,
        created_at=request.created_at,
    )
    return CommentResponse.from_domain(comment)


@router.get("", response_model=CommentPageResponse)
async def list_comments(
    comment_service: FromDishka[CommentService],
    page: str | None = None,
    limit: str | None = None,
) -> CommentPageResponse:
    """List all comments, newest first.

    Args:
        comment_service: Comment service from DI
        page: Page number (defaults to 1 when absent or not a number)
        limit: Page size (defaults to 10 when absent or not a number)

    Returns:
        Page envelope
    """
    result = await comment_service.list_comments(page=page, page_size=limit)
    return CommentPageResponse.from_domain(result)


@router.get("/search", response_model=CommentPageResponse)
async def search_comments(
    comment_service: FromDishka[CommentService],
    q: str | None = None,
    page: str | None = None,
    limit: str | None = None,
) -> CommentPageResponse:
    """Search comments by content (case-insensitive substring).

    Example:
        GET /comments/search?q=excelente&page=1&limit=10
    """
    if not q:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Query parameter 'q' is required",
        )

    result = await comment_service.search_comments(q, page=page, page_size=limit)
    return CommentPageResponse.from_domain(result)


@router.get("/event/{event_id}", response_model=CommentPageResponse)
async def list_event_comments(
    event_id: str,
    comment_service: FromDishka[CommentService],
    page: str | None = None,
    limit: str | None = None,
) -> CommentPageResponse:
    """List the comments of an event, newest first.

    An event without comments gives an empty page, not a 404.
    """
    result = await comment_service.list_comments_for_event(
        event_id, page=page, page_size=limit
    )
    return CommentPageResponse.from_domain(result)


@router.get("/{comment_id}", response_model=CommentResponse)
async def get_comment(
    comment_id: str,
    comment_service: FromDishka[CommentService],
) -> CommentResponse:
    """Get a single comment with its author and event."""
    comment = await comment_service.get_comment(comment_id)
    return CommentResponse.from_domain(_found(comment, comment_id))


@router.put("/{comment_id}", response_model=CommentResponse)
async def update_comment(
    comment_id: str,
    request: UpdateCommentAPIRequest,
    comment_service: FromDishka[CommentService],
) -> CommentResponse:
    """Update a comment's content and/or like count.

    Args:
        comment_id: Comment UUID
        request: Fields to change
        comment_service: Comment service from DI

    Returns:
        Updated comment
    """
    comment = await comment_service.update_comment(
        comment_id, request.model_dump(exclude_none=True)
    )
    return CommentResponse.from_domain(_found(comment, comment_id))


@router.put("/{comment_id}/like", response_model=CommentResponse)
async def like_comment(
    comment_id: str,
    comment_service: FromDishka[CommentService],
) -> CommentResponse:
    """Add one like to a comment."""
    comment = await comment_service.like_comment(comment_id)
    return CommentResponse.from_domain(_found(comment, comment_id))


@router.delete(
    "/{comment_id}",
    response_model=CommentResponse,
    response_model_exclude_none=True,
)
async def delete_comment(
    comment_id: str,
    comment_service: FromDishka[CommentService],
) -> CommentResponse:
    """Delete a comment and return its last state."""
    comment = await comment_service.delete_comment(comment_id)
    return CommentResponse.from_domain(_found(comment, comment_id))
