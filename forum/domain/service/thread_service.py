"""Thread domain service."""

import logfire

from forum.domain.model import AddedThread, NewThread
from forum.domain.repository import ThreadRepository
from forum.domain.value import ThreadId

from .base import Service


class ThreadService(Service):
    """Domain service for thread operations."""

    def __init__(self, thread_repository: ThreadRepository) -> None:
        """Initialize thread service.

        Args:
            thread_repository: Thread repository
        """
        self.thread_repository = thread_repository

    async def add_thread(self, new_thread: NewThread) -> AddedThread:
        """Create a thread.

        Args:
            new_thread: Validated creation payload

        Returns:
            Created thread
        """
        with logfire.span(
            "thread_service.add_thread",
            owner=new_thread.owner,
            title_length=len(new_thread.title),
        ):
            added = await self.thread_repository.add(new_thread)
            logfire.info("Thread created", thread_id=added.id, owner=added.owner)
            return added

    async def verify_thread_exists(self, thread_id: ThreadId) -> None:
        """Check that a thread exists.

        Args:
            thread_id: Thread ID

        Raises:
            NotFoundError: If the thread does not exist
        """
        with logfire.span(
            "thread_service.verify_thread_exists", thread_id=str(thread_id)
        ):
            await self.thread_repository.verify_exists(thread_id)
