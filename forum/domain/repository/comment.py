"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import Any

from forum.domain.model import AddedComment, NewComment
from forum.domain.value import CommentId, ThreadId, UserId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def add(self, new_comment: NewComment) -> AddedComment:
        """Persist a new comment.

        The caller is responsible for checking that the thread exists.

        Args:
            new_comment: Validated creation payload

        Returns:
            The created comment (id, content, owner)
        """
        pass

    @abstractmethod
    async def verify_exists_in_thread(
        self, comment_id: CommentId, thread_id: ThreadId
    ) -> None:
        """Check that a comment exists in a thread and is not deleted.

        Args:
            comment_id: The comment ID
            thread_id: The thread the comment must belong to

        Raises:
            NotFoundError: If the comment is missing, deleted, or belongs to
                another thread
        """
        pass

    @abstractmethod
    async def verify_owner(self, comment_id: CommentId, owner: UserId) -> None:
        """Check that a user owns a comment.

        Args:
            comment_id: The comment ID
            owner: The user claiming ownership

        Raises:
            NotFoundError: If the comment does not exist
            ForbiddenError: If the comment belongs to someone else
        """
        pass

    @abstractmethod
    async def soft_delete(self, comment_id: CommentId) -> None:
        """Mark a comment as deleted.

        Idempotent; the stored content is left untouched.

        Args:
            comment_id: The comment ID
        """
        pass

    @abstractmethod
    async def list_by_thread(self, thread_id: ThreadId) -> list[dict[str, Any]]:
        """List every comment of a thread, deleted ones included.

        Args:
            thread_id: The thread ID

        Returns:
            Rows with ``id``, ``username``, ``date``, ``content`` and
            ``is_delete``, ordered by ``date`` ascending with insertion
            order breaking ties
        """
        pass
