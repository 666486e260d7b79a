"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional

from sqlalchemy import Delete, Select, Update, desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from eventtalk.domain.model import Comment, CommentPatch, NewComment
from eventtalk.domain.repository import CommentRepository
from eventtalk.domain.value import CommentId, CommentQuery
from eventtalk.persistence.mappers import new_comment_to_dict, row_to_comment
from eventtalk.persistence.tables import comments_table

# Newest first; id breaks ties so consecutive pages never overlap
SCAN_ORDER = (desc(comments_table.c.created_at), desc(comments_table.c.id))


def apply_comment_query(stmt: Select, query: CommentQuery) -> Select:
    """Add the WHERE clauses for a comment query.

    Content matching is a case-insensitive substring test. LIKE wildcards in
    the search text are escaped so they match literally.

    Args:
        stmt: Statement selecting from the comments table
        query: Filters to apply

    Returns:
        Filtered statement
    """
    if query.event_id is not None:
        stmt = stmt.where(comments_table.c.event_id == query.event_id)
    if query.content_contains:
        stmt = stmt.where(
            comments_table.c.content.icontains(query.content_contains, autoescape=True)
        )
    return stmt


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository.

    Every mutation is a single statement with RETURNING and is committed
    before the method returns.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def create(self, comment: NewComment) -> Comment:
        """Insert a comment; the database assigns the id."""
        stmt = (
            comments_table.insert()
            .values(**new_comment_to_dict(comment))
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        row = result.one()
        await self.session.commit()
        return row_to_comment(row._asdict())

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_page(
        self,
        query: CommentQuery,
        limit: int,
        offset: int = 0,
    ) -> List[Comment]:
        """Find comments matching a query, newest first."""
        stmt = (
            apply_comment_query(select(comments_table), query)
            .order_by(*SCAN_ORDER)
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def count(self, query: CommentQuery) -> int:
        """Count comments matching a query."""
        stmt = apply_comment_query(
            select(func.count()).select_from(comments_table), query
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def update(
        self, comment_id: CommentId, patch: CommentPatch
    ) -> Optional[Comment]:
        """Overwrite content and/or like count."""
        changes = patch.changes()
        if not changes:
            return await self.find_by_id(comment_id)

        stmt: Update = (
            comments_table.update()
            .where(comments_table.c.id == comment_id)
            .values(**changes)
            .returning(comments_table)
        )
        return await self._execute_returning(stmt)

    async def increment_like_count(self, comment_id: CommentId) -> Optional[Comment]:
        """Atomically increment like count by 1."""
        stmt: Update = (
            comments_table.update()
            .where(comments_table.c.id == comment_id)
            .values(like_count=comments_table.c.like_count + 1)
            .returning(comments_table)
        )
        return await self._execute_returning(stmt)

    async def delete(self, comment_id: CommentId) -> Optional[Comment]:
        """Delete a comment (hard delete) and return its last state."""
        stmt: Delete = (
            comments_table.delete()
            .where(comments_table.c.id == comment_id)
            .returning(comments_table)
        )
        return await self._execute_returning(stmt)

    async def _execute_returning(self, stmt: Update | Delete) -> Optional[Comment]:
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.commit()
        return row_to_comment(row._asdict()) if row else None
