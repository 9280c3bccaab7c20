"""In-memory thread repository for testing."""

from datetime import UTC, datetime
from typing import Any

from forum.domain.error import NotFoundError
from forum.domain.model import AddedThread, NewThread
from forum.domain.repository.thread import ThreadRepository
from forum.domain.value import ThreadId, generate_id


class InMemoryThreadRepository(ThreadRepository):
    """In-memory implementation of ThreadRepository for testing."""

    def __init__(self) -> None:
        self._threads: dict[str, dict[str, Any]] = {}

    def put(self, row: dict[str, Any]) -> None:
        """Store a thread row as-is (for seeding tests)."""
        self._threads[row["id"]] = dict(row)

    async def add(self, new_thread: NewThread) -> AddedThread:
        """Persist a new thread."""
        thread_id = generate_id("thread")
        self._threads[thread_id] = {
            "id": thread_id,
            "title": new_thread.title,
            "body": new_thread.body,
            "owner": new_thread.owner,
            "username": new_thread.username,
            "date": datetime.now(UTC),
        }
        return AddedThread(id=thread_id, title=new_thread.title, owner=new_thread.owner)

    async def verify_exists(self, thread_id: ThreadId) -> None:
        """Check that a thread exists."""
        if thread_id not in self._threads:
            raise NotFoundError("thread", thread_id)

    async def get_by_id(self, thread_id: ThreadId) -> dict[str, Any]:
        """Get a thread row for display."""
        thread = self._threads.get(thread_id)
        if thread is None:
            raise NotFoundError("thread", thread_id)
        return {
            key: thread[key] for key in ("id", "title", "body", "date", "username")
        }
