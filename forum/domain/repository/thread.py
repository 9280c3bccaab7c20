"""Thread repository interface."""

from abc import ABC, abstractmethod
from typing import Any

from forum.domain.model import AddedThread, NewThread
from forum.domain.value import ThreadId


class ThreadRepository(ABC):
    """Repository for Thread entity.

    Defines the contract for thread persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def add(self, new_thread: NewThread) -> AddedThread:
        """Persist a new thread.

        Args:
            new_thread: Validated creation payload

        Returns:
            The created thread (id, title, owner)
        """
        pass

    @abstractmethod
    async def verify_exists(self, thread_id: ThreadId) -> None:
        """Check that a thread exists.

        Args:
            thread_id: The thread ID

        Raises:
            NotFoundError: If the thread does not exist
        """
        pass

    @abstractmethod
    async def get_by_id(self, thread_id: ThreadId) -> dict[str, Any]:
        """Get a thread row for display.

        Args:
            thread_id: The thread ID

        Returns:
            Row with ``id``, ``title``, ``body``, ``date`` and ``username``
            (the owner's display name)

        Raises:
            NotFoundError: If the thread does not exist
        """
        pass
