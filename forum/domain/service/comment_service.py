"""Comment domain service."""

import logfire

from forum.domain.model import AddedComment, NewComment
from forum.domain.repository import CommentRepository
from forum.domain.value import CommentId, ThreadId

from .base import Service


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def add_comment(self, new_comment: NewComment) -> AddedComment:
        """Create a comment on a thread.

        The thread must already have been verified by the caller.

        Args:
            new_comment: Validated creation payload

        Returns:
            Created comment
        """
        with logfire.span(
            "comment_service.add_comment",
            thread_id=new_comment.thread_id,
            owner=new_comment.owner,
        ):
            added = await self.comment_repository.add(new_comment)
            logfire.info(
                "Comment created",
                comment_id=added.id,
                thread_id=new_comment.thread_id,
                owner=added.owner,
            )
            return added

    async def verify_comment_in_thread(
        self, comment_id: CommentId, thread_id: ThreadId
    ) -> None:
        """Check that a live comment exists in a thread.

        Args:
            comment_id: Comment ID
            thread_id: Thread ID

        Raises:
            NotFoundError: If the comment is missing, deleted, or elsewhere
        """
        with logfire.span(
            "comment_service.verify_comment_in_thread",
            comment_id=str(comment_id),
            thread_id=str(thread_id),
        ):
            await self.comment_repository.verify_exists_in_thread(
                comment_id, thread_id
            )

    async def delete_comment(self, comment_id: CommentId) -> None:
        """Soft-delete a comment.

        Authorization must be checked before calling this.

        Args:
            comment_id: Comment ID
        """
        with logfire.span(
            "comment_service.delete_comment", comment_id=str(comment_id)
        ):
            await self.comment_repository.soft_delete(comment_id)
            logfire.info("Comment soft-deleted", comment_id=str(comment_id))
