"""PostgreSQL implementation of Comment repository."""

from typing import Any

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.error import ForbiddenError, NotFoundError
from forum.domain.model import AddedComment, NewComment
from forum.domain.repository import CommentRepository
from forum.domain.value import CommentId, ThreadId, UserId, generate_id
from forum.persistence.mappers import new_comment_to_dict, row_to_added_comment
from forum.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def add(self, new_comment: NewComment) -> AddedComment:
        """Persist a new comment."""
        comment_id = generate_id("comment")
        stmt = (
            insert(comments_table)
            .values(**new_comment_to_dict(comment_id, new_comment))
            .returning(
                comments_table.c.id,
                comments_table.c.content,
                comments_table.c.owner,
            )
        )
        result = await self.session.execute(stmt)
        row = result.one()
        await self.session.flush()
        return row_to_added_comment(row._asdict())

    async def verify_exists_in_thread(
        self, comment_id: CommentId, thread_id: ThreadId
    ) -> None:
        """Check that a live comment exists in a thread."""
        stmt = (
            select(comments_table.c.id)
            .where(comments_table.c.id == comment_id)
            .where(comments_table.c.thread_id == thread_id)
            .where(comments_table.c.is_delete.is_(False))
        )
        result = await self.session.execute(stmt)
        if result.first() is None:
            raise NotFoundError("comment", comment_id, scope=f"thread {thread_id}")

    async def verify_owner(self, comment_id: CommentId, owner: UserId) -> None:
        """Check that a user owns a comment."""
        stmt = select(comments_table.c.owner).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        stored_owner = result.scalar_one_or_none()
        if stored_owner is None:
            raise NotFoundError("comment", comment_id)
        if stored_owner != owner:
            raise ForbiddenError("comment", comment_id, owner)

    async def soft_delete(self, comment_id: CommentId) -> None:
        """Mark a comment as deleted."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(is_delete=True)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def list_by_thread(self, thread_id: ThreadId) -> list[dict[str, Any]]:
        """List every comment of a thread, oldest first."""
        stmt = (
            select(
                comments_table.c.id,
                comments_table.c.username,
                comments_table.c.date,
                comments_table.c.content,
                comments_table.c.is_delete,
            )
            .where(comments_table.c.thread_id == thread_id)
            .order_by(comments_table.c.date.asc(), comments_table.c.seq.asc())
        )
        result = await self.session.execute(stmt)
        return [row._asdict() for row in result.fetchall()]
