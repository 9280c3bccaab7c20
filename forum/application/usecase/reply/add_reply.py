"""Add reply use case."""

from typing import Any

from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.domain.model import NewReply
from forum.domain.service import CommentService, ReplyService
from forum.domain.value import CommentId, ThreadId


class AddReplyRequest(BaseModel):
    """Add reply request."""

    thread_id: str
    comment_id: str
    payload: dict[str, Any]  # Raw request body, validated by NewReply
    owner: str  # User ID from authenticated user
    username: str  # Display name from authenticated user


class AddReplyResponse(BaseModel):
    """Add reply response."""

    id: str
    content: str
    owner: str


class AddReplyUseCase(BaseUseCase):
    """Use case for replying to a comment."""

    def __init__(
        self,
        comment_service: CommentService,
        reply_service: ReplyService,
    ) -> None:
        """Initialize add reply use case.

        Args:
            comment_service: Comment domain service
            reply_service: Reply domain service
        """
        self.comment_service = comment_service
        self.reply_service = reply_service

    async def execute(self, request: AddReplyRequest) -> AddReplyResponse:
        """Execute add reply flow.

        Steps:
        1. Validate the payload
        2. Verify the comment exists in the thread and is not deleted
        3. Create the reply

        Args:
            request: Add reply request

        Returns:
            Created reply

        Raises:
            ValidationError: If content is missing or not a string
            NotFoundError: If the comment is missing, deleted, or not in the
                thread
        """
        new_reply = NewReply.create(
            request.payload,
            thread_id=request.thread_id,
            comment_id=request.comment_id,
            owner=request.owner,
            username=request.username,
        )

        await self.comment_service.verify_comment_in_thread(
            CommentId(request.comment_id), ThreadId(request.thread_id)
        )

        added = await self.reply_service.add_reply(new_reply)

        return AddReplyResponse(id=added.id, content=added.content, owner=added.owner)
