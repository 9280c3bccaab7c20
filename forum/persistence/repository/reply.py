"""PostgreSQL implementation of Reply repository."""

from collections.abc import Sequence
from typing import Any

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.error import ForbiddenError, NotFoundError
from forum.domain.model import AddedReply, NewReply
from forum.domain.repository import ReplyRepository
from forum.domain.value import CommentId, ReplyId, UserId, generate_id
from forum.persistence.mappers import new_reply_to_dict, row_to_added_reply
from forum.persistence.tables import replies_table


class PostgresReplyRepository(ReplyRepository):
    """PostgreSQL implementation of ReplyRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def add(self, new_reply: NewReply) -> AddedReply:
        """Persist a new reply."""
        reply_id = generate_id("reply")
        stmt = (
            insert(replies_table)
            .values(**new_reply_to_dict(reply_id, new_reply))
            .returning(
                replies_table.c.id,
                replies_table.c.content,
                replies_table.c.owner,
            )
        )
        result = await self.session.execute(stmt)
        row = result.one()
        await self.session.flush()
        return row_to_added_reply(row._asdict())

    async def verify_exists_in_comment(
        self, reply_id: ReplyId, comment_id: CommentId
    ) -> None:
        """Check that a live reply exists on a comment."""
        stmt = (
            select(replies_table.c.id)
            .where(replies_table.c.id == reply_id)
            .where(replies_table.c.comment_id == comment_id)
            .where(replies_table.c.is_delete.is_(False))
        )
        result = await self.session.execute(stmt)
        if result.first() is None:
            raise NotFoundError("reply", reply_id, scope=f"comment {comment_id}")

    async def verify_owner(self, reply_id: ReplyId, owner: UserId) -> None:
        """Check that a user owns a reply."""
        stmt = select(replies_table.c.owner).where(replies_table.c.id == reply_id)
        result = await self.session.execute(stmt)
        stored_owner = result.scalar_one_or_none()
        if stored_owner is None:
            raise NotFoundError("reply", reply_id)
        if stored_owner != owner:
            raise ForbiddenError("reply", reply_id, owner)

    async def soft_delete(self, reply_id: ReplyId) -> None:
        """Mark a reply as deleted."""
        stmt = (
            update(replies_table)
            .where(replies_table.c.id == reply_id)
            .values(is_delete=True)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def list_by_comment_ids(
        self, comment_ids: Sequence[CommentId]
    ) -> list[dict[str, Any]]:
        """List every reply of the given comments, oldest first."""
        if not comment_ids:
            return []

        stmt = (
            select(
                replies_table.c.id,
                replies_table.c.username,
                replies_table.c.date,
                replies_table.c.content,
                replies_table.c.is_delete,
                replies_table.c.comment_id,
            )
            .where(replies_table.c.comment_id.in_(list(comment_ids)))
            .order_by(replies_table.c.date.asc(), replies_table.c.seq.asc())
        )
        result = await self.session.execute(stmt)
        return [row._asdict() for row in result.fetchall()]
