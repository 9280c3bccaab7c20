"""Thread detail domain service."""

from collections import defaultdict

import logfire

from forum.domain.model import DetailComment, DetailReply, DetailThread
from forum.domain.repository import (
    CommentRepository,
    ReplyRepository,
    ThreadRepository,
)
from forum.domain.value import CommentId, ThreadId

from .base import Service


class ThreadDetailService(Service):
    """Assembles a thread with its comments and replies into one view."""

    def __init__(
        self,
        thread_repository: ThreadRepository,
        comment_repository: CommentRepository,
        reply_repository: ReplyRepository,
    ) -> None:
        """Initialize thread detail service.

        Args:
            thread_repository: Thread repository
            comment_repository: Comment repository
            reply_repository: Reply repository
        """
        self.thread_repository = thread_repository
        self.comment_repository = comment_repository
        self.reply_repository = reply_repository

    async def get_thread_detail(self, thread_id: ThreadId) -> DetailThread:
        """Build the detail view of a thread.

        Steps:
        1. Verify the thread exists (nothing else is fetched otherwise)
        2. Fetch the thread row and every comment row of the thread
        3. Fetch the replies of all comments in a single batched call,
           skipped entirely when the thread has no comments
        4. Group replies under their comment, keeping fetch order, and build
           the view bottom-up: replies, then comments, then the thread

        Deleted comments and replies stay in the view with masked content.

        Args:
            thread_id: Thread ID

        Returns:
            Fully populated thread detail

        Raises:
            NotFoundError: If the thread does not exist
            ValidationError: If a stored row is malformed
        """
        with logfire.span(
            "thread_detail_service.get_thread_detail", thread_id=str(thread_id)
        ):
            await self.thread_repository.verify_exists(thread_id)

            thread_row = await self.thread_repository.get_by_id(thread_id)
            comment_rows = await self.comment_repository.list_by_thread(thread_id)

            if not comment_rows:
                logfire.info("Thread has no comments", thread_id=str(thread_id))
                return DetailThread.create(thread_row, comments=[])

            comment_ids = [CommentId(row["id"]) for row in comment_rows]
            reply_rows = await self.reply_repository.list_by_comment_ids(comment_ids)

            replies_by_comment: dict[str, list[DetailReply]] = defaultdict(list)
            for row in reply_rows:
                replies_by_comment[row.get("comment_id")].append(
                    DetailReply.create(row)
                )

            comments = [
                DetailComment.create(
                    row, replies=replies_by_comment.get(row.get("id"), [])
                )
                for row in comment_rows
            ]

            logfire.info(
                "Thread detail assembled",
                thread_id=str(thread_id),
                comment_count=len(comments),
                reply_count=len(reply_rows),
            )
            return DetailThread.create(thread_row, comments=comments)
