"""In-memory comment repository for testing."""

from typing import Optional
from uuid import uuid4

from eventtalk.domain.model.comment import Comment, CommentPatch, NewComment
from eventtalk.domain.repository.comment import CommentRepository
from eventtalk.domain.value import CommentId, CommentQuery


def _matches(comment: Comment, query: CommentQuery) -> bool:
    if query.event_id is not None and comment.event_id != query.event_id:
        return False
    if query.content_contains:
        return query.content_contains.lower() in comment.content.lower()
    return True


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing.

    Mutations never await between reading and writing a comment, so each
    one is atomic with respect to other coroutines.
    """

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def create(self, comment: NewComment) -> Comment:
        """Store a new comment under a fresh id."""
        saved = Comment(id=CommentId(uuid4()), **comment.model_dump())
        self._comments[saved.id] = saved
        return saved

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_page(
        self,
        query: CommentQuery,
        limit: int,
        offset: int = 0,
    ) -> list[Comment]:
        """Find comments matching a query, newest first."""
        comments = [c for c in self._comments.values() if _matches(c, query)]

        # Sort by created_at descending, id breaks ties
        comments.sort(key=lambda c: (c.created_at, c.id), reverse=True)

        # Paginate
        return comments[offset : offset + limit]

    async def count(self, query: CommentQuery) -> int:
        """Count comments matching a query."""
        return sum(1 for c in self._comments.values() if _matches(c, query))

    async def update(
        self, comment_id: CommentId, patch: CommentPatch
    ) -> Optional[Comment]:
        """Overwrite content and/or like count."""
        comment = self._comments.get(comment_id)
        if comment is None:
            return None

        # Create updated comment (since comments are immutable)
        updated = comment.model_copy(update=patch.changes())
        self._comments[comment_id] = updated
        return updated

    async def increment_like_count(self, comment_id: CommentId) -> Optional[Comment]:
        """Atomically increment like count by 1."""
        comment = self._comments.get(comment_id)
        if comment is None:
            return None

        updated = comment.model_copy(update={"like_count": comment.like_count + 1})
        self._comments[comment_id] = updated
        return updated

    async def delete(self, comment_id: CommentId) -> Optional[Comment]:
        """Delete a comment."""
        return self._comments.pop(comment_id, None)
