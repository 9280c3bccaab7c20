"""PostgreSQL implementation of Thread repository."""

from typing import Any

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.error import NotFoundError
from forum.domain.model import AddedThread, NewThread
from forum.domain.repository import ThreadRepository
from forum.domain.value import ThreadId, generate_id
from forum.persistence.mappers import new_thread_to_dict, row_to_added_thread
from forum.persistence.tables import threads_table


class PostgresThreadRepository(ThreadRepository):
    """PostgreSQL implementation of ThreadRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def add(self, new_thread: NewThread) -> AddedThread:
        """Persist a new thread."""
        thread_id = generate_id("thread")
        stmt = (
            insert(threads_table)
            .values(**new_thread_to_dict(thread_id, new_thread))
            .returning(threads_table.c.id, threads_table.c.title, threads_table.c.owner)
        )
        result = await self.session.execute(stmt)
        row = result.one()
        await self.session.flush()
        return row_to_added_thread(row._asdict())

    async def verify_exists(self, thread_id: ThreadId) -> None:
        """Check that a thread exists."""
        stmt = select(threads_table.c.id).where(threads_table.c.id == thread_id)
        result = await self.session.execute(stmt)
        if result.first() is None:
            raise NotFoundError("thread", thread_id)

    async def get_by_id(self, thread_id: ThreadId) -> dict[str, Any]:
        """Get a thread row for display."""
        stmt = select(
            threads_table.c.id,
            threads_table.c.title,
            threads_table.c.body,
            threads_table.c.date,
            threads_table.c.username,
        ).where(threads_table.c.id == thread_id)
        result = await self.session.execute(stmt)
        row = result.first()
        if row is None:
            raise NotFoundError("thread", thread_id)
        return row._asdict()
