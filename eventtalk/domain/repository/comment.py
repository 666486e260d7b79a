"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from eventtalk.domain.model.comment import Comment, CommentPatch, NewComment
from eventtalk.domain.value import CommentId, CommentQuery


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.

    Scans are always ordered newest first (``created_at`` descending, then
    ``id`` descending so that pages never overlap).
    """

    @abstractmethod
    async def create(self, comment: NewComment) -> Comment:
        """Persist a new comment.

        Args:
            comment: The comment to insert

        Returns:
            The stored comment with its backend-assigned id
        """
        pass

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_page(
        self,
        query: CommentQuery,
        limit: int,
        offset: int = 0,
    ) -> List[Comment]:
        """Find comments matching a query, newest first.

        Args:
            query: Filters to apply
            limit: Maximum number of comments to return
            offset: Number of comments to skip

        Returns:
            Matching comments in scan order
        """
        pass

    @abstractmethod
    async def count(self, query: CommentQuery) -> int:
        """Count comments matching a query.

        Args:
            query: Filters to apply

        Returns:
            Number of matching comments
        """
        pass

    @abstractmethod
    async def update(
        self, comment_id: CommentId, patch: CommentPatch
    ) -> Optional[Comment]:
        """Apply a partial update.

        Only ``content`` and ``like_count`` can change. An empty patch
        returns the stored comment unchanged.

        Args:
            comment_id: The comment to update
            patch: Fields to overwrite

        Returns:
            The updated comment, or None if it doesn't exist
        """
        pass

    @abstractmethod
    async def increment_like_count(self, comment_id: CommentId) -> Optional[Comment]:
        """Atomically increment the like counter by 1.

        Must be a single operation against the backend so concurrent
        increments are never lost.

        Args:
            comment_id: The comment to like

        Returns:
            The updated comment, or None if it doesn't exist
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> Optional[Comment]:
        """Delete a comment (hard delete).

        Args:
            comment_id: The comment ID to delete

        Returns:
            The comment as it was before deletion, or None if it didn't exist
        """
        pass
