"""Delete authorization domain service.

Every soft delete is gated by the same ordered chain:

1. the parent scope exists,
2. the target exists in that scope and is not already deleted,
3. the actor owns the target.

Checks run one after another and stop at the first failure. Ownership is
always checked last, against a record known to exist, so a missing target
surfaces as NotFoundError and never as ForbiddenError.
"""

import logfire

from forum.domain.repository import (
    CommentRepository,
    ReplyRepository,
    ThreadRepository,
)
from forum.domain.value import CommentId, ReplyId, ThreadId, UserId

from .base import Service


class DeleteAuthorizationService(Service):
    """Domain service verifying that a delete may proceed."""

    def __init__(
        self,
        thread_repository: ThreadRepository,
        comment_repository: CommentRepository,
        reply_repository: ReplyRepository,
    ) -> None:
        """Initialize delete authorization service.

        Args:
            thread_repository: Thread repository
            comment_repository: Comment repository
            reply_repository: Reply repository
        """
        self.thread_repository = thread_repository
        self.comment_repository = comment_repository
        self.reply_repository = reply_repository

    async def authorize_comment_deletion(
        self, thread_id: ThreadId, comment_id: CommentId, actor: UserId
    ) -> None:
        """Verify that ``actor`` may delete a comment.

        Args:
            thread_id: Thread the comment is claimed to belong to
            comment_id: Comment to delete
            actor: User requesting the delete

        Raises:
            NotFoundError: If the thread is missing, or the comment is missing,
                deleted, or in another thread
            ForbiddenError: If the actor does not own the comment
        """
        with logfire.span(
            "authorization_service.authorize_comment_deletion",
            thread_id=str(thread_id),
            comment_id=str(comment_id),
            actor=str(actor),
        ):
            await self.thread_repository.verify_exists(thread_id)
            await self.comment_repository.verify_exists_in_thread(
                comment_id, thread_id
            )
            await self.comment_repository.verify_owner(comment_id, actor)
            logfire.info(
                "Comment deletion authorized",
                comment_id=str(comment_id),
                actor=str(actor),
            )

    async def authorize_reply_deletion(
        self,
        thread_id: ThreadId,
        comment_id: CommentId,
        reply_id: ReplyId,
        actor: UserId,
    ) -> None:
        """Verify that ``actor`` may delete a reply.

        The comment lookup is scoped to the thread, so an unknown thread also
        fails at the first step.

        Args:
            thread_id: Thread the comment is claimed to belong to
            comment_id: Comment the reply is claimed to belong to
            reply_id: Reply to delete
            actor: User requesting the delete

        Raises:
            NotFoundError: If the comment is missing or deleted in the thread,
                or the reply is missing, deleted, or on another comment
            ForbiddenError: If the actor does not own the reply
        """
        with logfire.span(
            "authorization_service.authorize_reply_deletion",
            thread_id=str(thread_id),
            comment_id=str(comment_id),
            reply_id=str(reply_id),
            actor=str(actor),
        ):
            await self.comment_repository.verify_exists_in_thread(
                comment_id, thread_id
            )
            await self.reply_repository.verify_exists_in_comment(reply_id, comment_id)
            await self.reply_repository.verify_owner(reply_id, actor)
            logfire.info(
                "Reply deletion authorized",
                reply_id=str(reply_id),
                actor=str(actor),
            )
